from dataclasses import dataclass, field
from typing import Dict, List, Optional

from fsx_windows import FileAccessAuditLogLevel, FileShareAccessAuditLogLevel, Weekday
from fsx_windows import WindowsDeploymentType, WindowsStorageType


@dataclass
class RegionConfig:
    region: str
    vpc_cidr: str
    max_azs: int
    nat_gateways: int


@dataclass
class FileSystemConfig:
    deployment_type: WindowsDeploymentType
    storage_type: WindowsStorageType
    throughput_capacity: int
    storage_capacity_gib: int
    backup_retention_days: int
    backup_start_hour: int
    backup_start_minute: int
    maintenance_day: Weekday
    maintenance_hour: int
    maintenance_minute: int
    active_directory_id: Optional[str] = None
    aliases: List[str] = field(default_factory=list)
    file_access_audit_log_level: FileAccessAuditLogLevel = FileAccessAuditLogLevel.DISABLED
    file_share_access_audit_log_level: FileShareAccessAuditLogLevel = (
        FileShareAccessAuditLogLevel.DISABLED
    )


@dataclass
class EnvironmentConfig:
    environment_name: str
    region: RegionConfig
    file_system: FileSystemConfig
    retain_on_delete: bool
    enable_audit_logs: bool


# Production Configuration for Australian deployment
PRODUCTION_CONFIG = EnvironmentConfig(
    environment_name="production",
    region=RegionConfig(
        region="ap-southeast-2",  # Sydney - Australian data sovereignty
        vpc_cidr="10.0.0.0/16",
        max_azs=2,
        nat_gateways=2,
    ),
    file_system=FileSystemConfig(
        deployment_type=WindowsDeploymentType.SINGLE_AZ_2,
        storage_type=WindowsStorageType.SSD,
        throughput_capacity=64,
        storage_capacity_gib=1024,
        backup_retention_days=30,
        backup_start_hour=3,
        backup_start_minute=0,
        maintenance_day=Weekday.SUNDAY,
        maintenance_hour=4,
        maintenance_minute=0,
        active_directory_id="d-9067a1b2c3",
        aliases=["share.corp.example.com"],
        file_access_audit_log_level=FileAccessAuditLogLevel.SUCCESS_AND_FAILURE,
        file_share_access_audit_log_level=FileShareAccessAuditLogLevel.FAILURE_ONLY,
    ),
    retain_on_delete=True,
    enable_audit_logs=True,
)

# Development Configuration - small HDD file system, torn down with the stack
DEVELOPMENT_CONFIG = EnvironmentConfig(
    environment_name="development",
    region=RegionConfig(
        region="ap-southeast-2",
        vpc_cidr="10.10.0.0/16",
        max_azs=2,
        nat_gateways=1,
    ),
    file_system=FileSystemConfig(
        deployment_type=WindowsDeploymentType.SINGLE_AZ_2,
        storage_type=WindowsStorageType.HDD,
        throughput_capacity=32,
        storage_capacity_gib=2000,
        backup_retention_days=7,
        backup_start_hour=1,
        backup_start_minute=30,
        maintenance_day=Weekday.SATURDAY,
        maintenance_hour=22,
        maintenance_minute=0,
        active_directory_id="d-9067a1b2c3",
    ),
    retain_on_delete=False,
    enable_audit_logs=False,
)

ENVIRONMENTS: Dict[str, EnvironmentConfig] = {
    PRODUCTION_CONFIG.environment_name: PRODUCTION_CONFIG,
    DEVELOPMENT_CONFIG.environment_name: DEVELOPMENT_CONFIG,
}


def get_environment_config(name: str) -> EnvironmentConfig:
    try:
        return ENVIRONMENTS[name]
    except KeyError:
        raise KeyError(
            f"Unknown environment '{name}', expected one of {sorted(ENVIRONMENTS)}"
        ) from None
