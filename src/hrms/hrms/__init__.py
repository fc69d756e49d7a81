"""HRMS business-rule package.

Feature modules (permissions, attendance, payroll, performance, goals,
dashboard) hold pure domain logic. Records are supplied by the caller through
the ``records`` collaborators; nothing here persists its own state.
"""
