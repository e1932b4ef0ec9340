from typing import Optional

from aws_cdk import aws_fsx as fsx

from fsx_windows.configuration import (
    AuditLogConfiguration,
    SelfManagedActiveDirectoryConfiguration,
    WindowsConfiguration,
)


def build_self_managed_active_directory_configuration(
    config: Optional[SelfManagedActiveDirectoryConfiguration],
) -> Optional[fsx.CfnFileSystem.SelfManagedActiveDirectoryConfigurationProperty]:
    if config is None:
        return None
    return fsx.CfnFileSystem.SelfManagedActiveDirectoryConfigurationProperty(
        dns_ips=list(config.dns_ips) if config.dns_ips is not None else None,
        domain_name=config.domain_name,
        file_system_administrators_group=config.file_system_administrators_group,
        organizational_unit_distinguished_name=config.organizational_unit_distinguished_name,
        password=config.password,
        user_name=config.username,
    )


def build_audit_log_configuration(
    config: Optional[AuditLogConfiguration],
) -> Optional[fsx.CfnFileSystem.AuditLogConfigurationProperty]:
    if config is None:
        return None
    return fsx.CfnFileSystem.AuditLogConfigurationProperty(
        file_access_audit_log_level=config.file_access_audit_log_level.value,
        file_share_access_audit_log_level=config.file_share_access_audit_log_level.value,
        audit_log_destination=config.audit_log_destination,
    )


def build_windows_configuration(
    config: WindowsConfiguration,
) -> fsx.CfnFileSystem.WindowsConfigurationProperty:
    """
    Translate a validated WindowsConfiguration into the CloudFormation struct.

    Scheduled times become their timestamps and the backup retention becomes
    whole days. Unset optional fields are left out of the struct entirely.
    The storage type is not part of this struct; it sits on the file system.
    """
    backup_start = config.daily_automatic_backup_start_time
    maintenance = config.weekly_maintenance_start_time
    retention = config.automatic_backup_retention

    return fsx.CfnFileSystem.WindowsConfigurationProperty(
        throughput_capacity=config.throughput_capacity,
        deployment_type=config.deployment_type.value,
        active_directory_id=config.active_directory_id,
        self_managed_active_directory_configuration=(
            build_self_managed_active_directory_configuration(
                config.self_managed_active_directory_configuration
            )
        ),
        aliases=list(config.aliases) if config.aliases is not None else None,
        audit_log_configuration=build_audit_log_configuration(config.audit_log_configuration),
        automatic_backup_retention_days=retention.to_days() if retention is not None else None,
        copy_tags_to_backups=config.copy_tags_to_backups,
        daily_automatic_backup_start_time=(
            backup_start.to_timestamp() if backup_start is not None else None
        ),
        weekly_maintenance_start_time=(
            maintenance.to_timestamp() if maintenance is not None else None
        ),
        preferred_subnet_id=config.preferred_subnet_id,
    )
