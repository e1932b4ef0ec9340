from dataclasses import dataclass

import structlog
from aws_cdk import aws_ec2 as ec2, aws_fsx as fsx, Aws, Stack, Tags
from constructs import Construct

from fsx_windows.assembler import build_windows_configuration
from fsx_windows.configuration import FileSystemAttributes, WindowsFileSystemProps
from fsx_windows.network import allow_self_ingress, configure_connections
from fsx_windows.validators import validate_windows_file_system_props

logger = structlog.get_logger(__name__)

FILE_SYSTEM_TYPE = "WINDOWS"


@dataclass(frozen=True)
class WindowsFileSystemHandle:
    """
    What callers get back for a file system, whether it was defined here
    or adopted from an existing deployment.
    """

    dns_name: str
    file_system_id: str
    connections: ec2.Connections


def import_windows_file_system(attrs: FileSystemAttributes) -> WindowsFileSystemHandle:
    """Adopt an existing file system; nothing is validated or created"""
    logger.debug("file_system_imported", file_system_id=attrs.file_system_id)
    return WindowsFileSystemHandle(
        dns_name=attrs.dns_name,
        file_system_id=attrs.file_system_id,
        connections=configure_connections(attrs.security_group),
    )


class WindowsFileSystem(Construct):
    """
    Amazon FSx for Windows File Server file system (AWS::FSx::FileSystem)
    with a security group open to itself on the file server ports
    """

    def __init__(
        self, scope: Construct, construct_id: str, props: WindowsFileSystemProps, **kwargs
    ) -> None:
        # Nothing may be added to the tree when the props are invalid
        validate_windows_file_system_props(props)
        super().__init__(scope, construct_id, **kwargs)

        self.security_group = self._resolve_security_group(props)
        allow_self_ingress(self.security_group)

        self.resource = fsx.CfnFileSystem(
            self,
            "Resource",
            file_system_type=FILE_SYSTEM_TYPE,
            subnet_ids=[props.vpc_subnet.subnet_id],
            backup_id=props.backup_id,
            kms_key_id=props.kms_key.key_id if props.kms_key is not None else None,
            storage_type=props.windows_configuration.storage_type.value,
            windows_configuration=build_windows_configuration(props.windows_configuration),
            security_group_ids=[self.security_group.security_group_id],
            storage_capacity=props.storage_capacity_gib,
        )
        self.resource.apply_removal_policy(props.removal_policy)

        file_system_id = self.resource.ref
        self.handle = WindowsFileSystemHandle(
            dns_name=f"{file_system_id}.fsx.{Stack.of(self).region}.{Aws.URL_SUFFIX}",
            file_system_id=file_system_id,
            connections=configure_connections(self.security_group),
        )

        Tags.of(self).add("Component", "FileSystem")
        logger.debug(
            "file_system_defined",
            construct_path=self.node.path,
            deployment_type=props.windows_configuration.deployment_type.value,
            storage_capacity_gib=props.storage_capacity_gib,
        )

    @property
    def dns_name(self) -> str:
        return self.handle.dns_name

    @property
    def file_system_id(self) -> str:
        return self.handle.file_system_id

    @property
    def connections(self) -> ec2.Connections:
        return self.handle.connections

    def _resolve_security_group(self, props: WindowsFileSystemProps) -> ec2.ISecurityGroup:
        """Reuse the caller's security group or create a dedicated one"""
        if props.security_group is not None:
            logger.debug("security_group_reused", construct_path=self.node.path)
            return props.security_group

        logger.debug("security_group_created", construct_path=self.node.path)
        return ec2.SecurityGroup(
            self,
            "FsxWindowsSecurityGroup",
            vpc=props.vpc,
            description="Security group for FSx for Windows file system",
        )


def create_windows_file_system(
    scope: Construct, construct_id: str, props: WindowsFileSystemProps
) -> WindowsFileSystemHandle:
    """Validate, define and return the handle of a new file system"""
    return WindowsFileSystem(scope, construct_id, props).handle
