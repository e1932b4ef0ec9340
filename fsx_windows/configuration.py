from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from aws_cdk import aws_ec2 as ec2, aws_kms as kms, Duration, RemovalPolicy

from fsx_windows.time_specs import BackupStartTime, MaintenanceTime


class WindowsDeploymentType(Enum):
    """Redundancy mode of the file system"""

    # Two file servers in separate AZs; needs a preferred subnet
    MULTI_AZ_1 = "MULTI_AZ_1"
    SINGLE_AZ_1 = "SINGLE_AZ_1"
    # Latest generation single AZ, supports HDD storage
    SINGLE_AZ_2 = "SINGLE_AZ_2"


class WindowsStorageType(Enum):
    SSD = "SSD"
    HDD = "HDD"


class FileAccessAuditLogLevel(Enum):
    """Which attempts to access files and folders are logged"""

    DISABLED = "DISABLED"
    SUCCESS_ONLY = "SUCCESS_ONLY"
    FAILURE_ONLY = "FAILURE_ONLY"
    SUCCESS_AND_FAILURE = "SUCCESS_AND_FAILURE"


class FileShareAccessAuditLogLevel(Enum):
    """Which attempts to access file shares are logged"""

    DISABLED = "DISABLED"
    SUCCESS_ONLY = "SUCCESS_ONLY"
    FAILURE_ONLY = "FAILURE_ONLY"
    SUCCESS_AND_FAILURE = "SUCCESS_AND_FAILURE"


@dataclass(frozen=True)
class SelfManagedActiveDirectoryConfiguration:
    """Join the file system to a self-managed (on-premises or EC2) AD domain"""

    dns_ips: Optional[List[str]] = None
    domain_name: Optional[str] = None
    file_system_administrators_group: Optional[str] = None
    organizational_unit_distinguished_name: Optional[str] = None
    password: Optional[str] = None
    username: Optional[str] = None


@dataclass(frozen=True)
class AuditLogConfiguration:
    file_access_audit_log_level: FileAccessAuditLogLevel
    file_share_access_audit_log_level: FileShareAccessAuditLogLevel
    # CloudWatch Logs log group or Kinesis Data Firehose stream ARN
    audit_log_destination: Optional[str] = None


@dataclass(frozen=True)
class WindowsConfiguration:
    """
    Windows specific settings of the file system.
    See AWS::FSx::FileSystem WindowsConfiguration for the field semantics.
    """

    deployment_type: WindowsDeploymentType
    storage_type: WindowsStorageType
    throughput_capacity: int
    active_directory_id: Optional[str] = None
    self_managed_active_directory_configuration: Optional[
        SelfManagedActiveDirectoryConfiguration
    ] = None
    aliases: Optional[List[str]] = None
    audit_log_configuration: Optional[AuditLogConfiguration] = None
    automatic_backup_retention: Optional[Duration] = None
    copy_tags_to_backups: Optional[bool] = None
    daily_automatic_backup_start_time: Optional[BackupStartTime] = None
    weekly_maintenance_start_time: Optional[MaintenanceTime] = None
    preferred_subnet_id: Optional[str] = None


@dataclass(frozen=True)
class WindowsFileSystemProps:
    vpc: ec2.IVpc
    vpc_subnet: ec2.ISubnet
    storage_capacity_gib: int
    windows_configuration: WindowsConfiguration
    security_group: Optional[ec2.ISecurityGroup] = None
    kms_key: Optional[kms.IKey] = None
    backup_id: Optional[str] = None
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN


@dataclass(frozen=True)
class FileSystemAttributes:
    """Attributes of an existing file system, for the import path"""

    dns_name: str
    file_system_id: str
    security_group: ec2.ISecurityGroup
