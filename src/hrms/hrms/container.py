from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from datetime import date
from types import ModuleType
from typing import Optional
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

from .attendance.service import AttendanceService
from .attendance.state_machine import AttendanceStateMachine
from .common.logging_utils import configure_logging
from .config import get_settings_module
from .core.constants import DEFAULT_MONEY_DECIMAL_PLACES
from .core.enums import Action, Resource
from .dashboard.aggregator import DashboardAggregator
from .database.connection import DBConfig, DatabaseConnection
from .identity.decorators import permission_required
from .identity.model import Principal
from .identity.provider import FlaskSessionIdentityProvider, IdentityProvider
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollService
from .performance.scorer import PerformanceScorer
from .permissions.service import PermissionEvaluator
from .records.attendance_repository import RecordStoreAttendanceRepository
from .records.model import RecordSets
from .records.mysql_record_store import MySQLRecordStore
from .records.snapshot import load_record_sets
from .records.store import InMemoryRecordStore, RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    settings: ModuleType

    record_store: RecordStore
    identity: IdentityProvider

    permissions: PermissionEvaluator
    attendance: AttendanceStateMachine
    payroll_calculator: StandardPayrollCalculator
    performance: PerformanceScorer
    dashboard: DashboardAggregator

    attendance_service: AttendanceService
    payroll_service: PayrollService

    def snapshot(self, principal: Principal, *, day: Optional[date] = None) -> RecordSets:
        """Role-scoped records for ``principal``, mapped with the configured zone and precision."""
        return load_record_sets(
            self.record_store,
            principal,
            self.permissions,
            day=day,
            state_machine=self.attendance,
            calculator=self.payroll_calculator,
        )

    def guard(self, resource: Resource, action: Action):
        """Flask view decorator backed by this container's rules and identity provider."""
        return permission_required(self.permissions, self.identity, resource, action)


def load_settings(module_name: Optional[str] = None) -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(module_name or get_settings_module())


def build_record_store(settings: ModuleType) -> RecordStore:
    kind = str(getattr(settings, "RECORD_STORE", "memory")).lower()
    if kind == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_mapping(getattr(settings, "DB_CONFIG")))
        return MySQLRecordStore(conn)
    return InMemoryRecordStore()


def build_container(
    *,
    settings: Optional[ModuleType] = None,
    record_store: Optional[RecordStore] = None,
    identity: Optional[IdentityProvider] = None,
) -> Container:
    settings = settings or load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), debug=bool(getattr(settings, "DEBUG", False)))

    zone_name = getattr(settings, "TIMEZONE", "") or None
    tz = ZoneInfo(zone_name) if zone_name else None
    places = int(getattr(settings, "MONEY_DECIMAL_PLACES", DEFAULT_MONEY_DECIMAL_PLACES))

    permissions = PermissionEvaluator()
    attendance = AttendanceStateMachine(tz=tz)
    calculator = StandardPayrollCalculator(decimal_places=places)
    scorer = PerformanceScorer()
    dashboard = DashboardAggregator(permissions, state_machine=attendance, scorer=scorer)
    store = record_store if record_store is not None else build_record_store(settings)

    logger.debug(
        "HRMS container ready: settings=%s store=%s tz=%s money_places=%s",
        settings.__name__, type(store).__name__, zone_name, places,
    )

    return Container(
        settings=settings,
        record_store=store,
        identity=identity or FlaskSessionIdentityProvider(),
        permissions=permissions,
        attendance=attendance,
        payroll_calculator=calculator,
        performance=scorer,
        dashboard=dashboard,
        attendance_service=AttendanceService(
            RecordStoreAttendanceRepository(store), permissions, state_machine=attendance
        ),
        payroll_service=PayrollService(permissions, calculator=calculator),
    )
