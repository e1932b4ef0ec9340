from aws_cdk import (
    Stack,
    aws_ec2 as ec2,
    aws_kms as kms,
    aws_logs as logs,
    CfnOutput,
    Duration,
    RemovalPolicy,
    Tags,
)
from constructs import Construct
from config.environments import EnvironmentConfig
from fsx_windows import (
    AuditLogConfiguration,
    BackupStartTime,
    MaintenanceTime,
    WindowsConfiguration,
    WindowsFileSystem,
    WindowsFileSystemProps,
)


class FileShareStack(Stack):
    """
    Windows file share for an environment: VPC, KMS key, audit log group
    and an FSx for Windows file system joined to the managed directory
    """

    def __init__(
        self, scope: Construct, construct_id: str, config: EnvironmentConfig, **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        fs_config = config.file_system
        removal_policy = RemovalPolicy.RETAIN if config.retain_on_delete else RemovalPolicy.DESTROY

        self.vpc = ec2.Vpc(
            self,
            "VPC",
            ip_addresses=ec2.IpAddresses.cidr(config.region.vpc_cidr),
            max_azs=config.region.max_azs,
            nat_gateways=config.region.nat_gateways,
            subnet_configuration=[
                ec2.SubnetConfiguration(
                    name="Public", subnet_type=ec2.SubnetType.PUBLIC, cidr_mask=24
                ),
                ec2.SubnetConfiguration(
                    name="FileShare",
                    subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS,
                    cidr_mask=24,
                ),
            ],
        )

        # Clients and the file system share this group
        self.file_share_sg = ec2.SecurityGroup(
            self,
            "FileShareSG",
            vpc=self.vpc,
            description="Security group for FSx for Windows file share",
            allow_all_outbound=True,
        )
        self.file_share_sg.add_ingress_rule(
            ec2.Peer.ipv4(self.vpc.vpc_cidr_block), ec2.Port.tcp(445), "SMB from VPC"
        )

        self.file_system_key = kms.Key(
            self,
            "FileSystemKey",
            description="KMS key for FSx for Windows encryption",
            enable_key_rotation=True,
            removal_policy=removal_policy,
        )

        self.audit_log_group = None
        audit_log_configuration = None
        if config.enable_audit_logs:
            # FSx only writes to log groups under /aws/fsx/
            self.audit_log_group = logs.LogGroup(
                self,
                "AuditLogGroup",
                log_group_name=f"/aws/fsx/windows-{config.environment_name}",
                retention=logs.RetentionDays.ONE_YEAR,
                removal_policy=removal_policy,
            )
            audit_log_configuration = AuditLogConfiguration(
                file_access_audit_log_level=fs_config.file_access_audit_log_level,
                file_share_access_audit_log_level=fs_config.file_share_access_audit_log_level,
                audit_log_destination=self.audit_log_group.log_group_arn,
            )

        subnet = self.vpc.private_subnets[0]
        self.file_system = WindowsFileSystem(
            self,
            "FileSystem",
            WindowsFileSystemProps(
                vpc=self.vpc,
                vpc_subnet=subnet,
                storage_capacity_gib=fs_config.storage_capacity_gib,
                security_group=self.file_share_sg,
                kms_key=self.file_system_key,
                removal_policy=removal_policy,
                windows_configuration=WindowsConfiguration(
                    deployment_type=fs_config.deployment_type,
                    storage_type=fs_config.storage_type,
                    throughput_capacity=fs_config.throughput_capacity,
                    active_directory_id=fs_config.active_directory_id,
                    aliases=fs_config.aliases or None,
                    audit_log_configuration=audit_log_configuration,
                    automatic_backup_retention=Duration.days(fs_config.backup_retention_days),
                    copy_tags_to_backups=True,
                    daily_automatic_backup_start_time=BackupStartTime(
                        hour=fs_config.backup_start_hour, minute=fs_config.backup_start_minute
                    ),
                    weekly_maintenance_start_time=MaintenanceTime(
                        day=fs_config.maintenance_day,
                        hour=fs_config.maintenance_hour,
                        minute=fs_config.maintenance_minute,
                    ),
                ),
            ),
        )

        CfnOutput(self, "FileSystemId", value=self.file_system.file_system_id)
        CfnOutput(self, "FileSystemDnsName", value=self.file_system.dns_name)

        # Tags
        Tags.of(self).add("Environment", config.environment_name)
        Tags.of(self).add("Application", "File-share")
