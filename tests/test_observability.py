import pytest
import structlog
from structlog.testing import capture_logs
from aws_cdk import Stack, aws_ec2 as ec2
from fsx_windows import (
    FileSystemAttributes,
    WindowsConfiguration,
    WindowsDeploymentType,
    WindowsFileSystem,
    WindowsFileSystemProps,
    WindowsStorageType,
    import_windows_file_system,
)
from fsx_windows.observability import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def make_props(vpc):
    return WindowsFileSystemProps(
        vpc=vpc,
        vpc_subnet=vpc.private_subnets[0],
        storage_capacity_gib=1200,
        windows_configuration=WindowsConfiguration(
            deployment_type=WindowsDeploymentType.SINGLE_AZ_1,
            storage_type=WindowsStorageType.SSD,
            throughput_capacity=8,
        ),
    )


class TestConstructLogging:
    """Test the constructs only log at debug level"""

    def test_file_system_events_are_debug(self):
        stack = Stack()
        vpc = ec2.Vpc(stack, "VPC")

        with capture_logs() as logs:
            WindowsFileSystem(stack, "FsxFileSystem", make_props(vpc))

        events = {entry["event"]: entry["log_level"] for entry in logs}
        assert events["file_system_defined"] == "debug"
        assert events["security_group_created"] == "debug"

    def test_import_event_is_debug(self):
        stack = Stack()
        security_group = ec2.SecurityGroup.from_security_group_id(stack, "SG", "sg-0123456789")

        with capture_logs() as logs:
            import_windows_file_system(
                FileSystemAttributes(
                    dns_name="fs-0123.corp.example.com",
                    file_system_id="fs-0123",
                    security_group=security_group,
                )
            )

        assert [(entry["event"], entry["log_level"]) for entry in logs] == [
            ("file_system_imported", "debug")
        ]


class TestConfigureLogging:
    """Test application log configuration"""

    def test_info_level_silences_construct_events(self, capsys):
        """Test a default app synth writes nothing for a valid file system"""
        configure_logging(log_level="INFO")
        stack = Stack()
        vpc = ec2.Vpc(stack, "VPC")

        WindowsFileSystem(stack, "FsxFileSystem", make_props(vpc))

        captured = capsys.readouterr()
        assert "file_system_defined" not in captured.out
        assert "file_system_defined" not in captured.err

    def test_debug_level_writes_to_stderr(self, capsys):
        configure_logging(log_level="debug", json_format=True)

        structlog.get_logger("fsx_windows.test").debug("share_mounted", answer=42)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert '"event": "share_mounted"' in captured.err
        assert '"answer": 42' in captured.err
