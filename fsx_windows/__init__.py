from fsx_windows.configuration import (
    AuditLogConfiguration,
    FileAccessAuditLogLevel,
    FileShareAccessAuditLogLevel,
    FileSystemAttributes,
    SelfManagedActiveDirectoryConfiguration,
    WindowsConfiguration,
    WindowsDeploymentType,
    WindowsFileSystemProps,
    WindowsStorageType,
)
from fsx_windows.errors import FsxWindowsError, TimeRangeError, ValidationError
from fsx_windows.time_specs import BackupStartTime, MaintenanceTime, Weekday
from fsx_windows.validators import Violation, collect_violations
from fsx_windows.windows_file_system import (
    WindowsFileSystem,
    WindowsFileSystemHandle,
    create_windows_file_system,
    import_windows_file_system,
)

__all__ = [
    "AuditLogConfiguration",
    "BackupStartTime",
    "FileAccessAuditLogLevel",
    "FileShareAccessAuditLogLevel",
    "FileSystemAttributes",
    "FsxWindowsError",
    "MaintenanceTime",
    "SelfManagedActiveDirectoryConfiguration",
    "TimeRangeError",
    "ValidationError",
    "Violation",
    "Weekday",
    "WindowsConfiguration",
    "WindowsDeploymentType",
    "WindowsFileSystem",
    "WindowsFileSystemHandle",
    "WindowsFileSystemProps",
    "WindowsStorageType",
    "collect_violations",
    "create_windows_file_system",
    "import_windows_file_system",
]
