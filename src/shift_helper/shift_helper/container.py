from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .auth.gateway import AuthGateway
from .auth.service import AuthService
from .auth.supabase_auth_gateway import SupabaseAuthGateway
from .database.connection import SupabaseConfig, SupabaseConnection
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .employees.supabase_employee_repository import SupabaseEmployeeRepository
from .presets.repository import PresetRepository
from .presets.service import PresetService
from .presets.supabase_preset_repository import SupabasePresetRepository
from .schedules.service import ScheduleService
from .shifts.repository import ShiftRepository
from .shifts.supabase_shift_repository import SupabaseShiftRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[SupabaseConnection]

    employees_repo: EmployeeRepository
    shifts_repo: ShiftRepository
    presets_repo: PresetRepository
    auth_gateway: AuthGateway

    auth_service: AuthService
    employee_service: EmployeeService
    schedule_service: ScheduleService
    preset_service: PresetService


def assemble(
    *,
    employees_repo: EmployeeRepository,
    shifts_repo: ShiftRepository,
    presets_repo: PresetRepository,
    auth_gateway: AuthGateway,
    conn: Optional[SupabaseConnection] = None,
) -> Container:
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        presets_repo=presets_repo,
        auth_gateway=auth_gateway,
        auth_service=AuthService(auth_gateway),
        employee_service=EmployeeService(employees_repo, shifts_repo),
        schedule_service=ScheduleService(employees_repo, shifts_repo),
        preset_service=PresetService(presets_repo),
    )


def build_container(*, supabase_config: dict) -> Container:
    config = SupabaseConfig(url=str(supabase_config["url"]), key=str(supabase_config["key"]))
    conn = SupabaseConnection.get_instance(config)

    return assemble(
        conn=conn,
        employees_repo=SupabaseEmployeeRepository(conn),
        shifts_repo=SupabaseShiftRepository(conn),
        presets_repo=SupabasePresetRepository(conn),
        auth_gateway=SupabaseAuthGateway(conn),
    )
