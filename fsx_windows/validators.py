"""
Field validators for FSx for Windows file system properties.

Every validator returns None when the value is acceptable and a Violation
naming the field otherwise. Values that only resolve at deploy time (CDK
tokens) are left for CloudFormation to check.
"""
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Optional, Sequence

import structlog
from aws_cdk import Duration, Token

from fsx_windows.configuration import WindowsDeploymentType
from fsx_windows.errors import ValidationError

if TYPE_CHECKING:
    from fsx_windows.configuration import WindowsFileSystemProps

logger = structlog.get_logger(__name__)

MIN_THROUGHPUT_CAPACITY = 8
MAX_THROUGHPUT_CAPACITY = 4096
MIN_STORAGE_CAPACITY_GIB = 32
MAX_STORAGE_CAPACITY_GIB = 65536
MAX_ALIASES = 50
MAX_DNS_IPS = 3
MAX_BACKUP_RETENTION_DAYS = 90

ACTIVE_DIRECTORY_ID_PATTERN = re.compile(r"^d-[0-9a-f]{10}$")
ARN_PATTERN = re.compile(
    r"^arn:[^:]{1,63}:[^:]{0,63}:[^:]{0,63}:(?:|\d{12}):[^/].{0,1023}$", re.DOTALL
)
# NUL, CR, LF, NEL, line separator, paragraph separator
SEPARATOR_PATTERN = re.compile("[\x00\r\n\x85\u2028\u2029]")


@dataclass(frozen=True)
class Violation:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_token(value) -> bool:
    return isinstance(value, (str, int, float)) and Token.is_unresolved(value)


def _validate_text(
    field: str, value: Optional[str], max_length: int, allow_separators: bool = False
) -> Optional[Violation]:
    if value is None or _is_token(value):
        return None
    if not 1 <= len(value) <= max_length:
        return Violation(field, f"must be between 1 and {max_length} characters long")
    if not allow_separators and SEPARATOR_PATTERN.search(value):
        return Violation(field, "must not contain line or paragraph separators")
    return None


def validate_throughput_capacity(value) -> Optional[Violation]:
    if _is_token(value):
        return None
    if (
        not _is_int(value)
        or value < MIN_THROUGHPUT_CAPACITY
        or value > MAX_THROUGHPUT_CAPACITY
        or value & (value - 1) != 0
    ):
        return Violation(
            "throughput capacity",
            f"must be between {MIN_THROUGHPUT_CAPACITY} and {MAX_THROUGHPUT_CAPACITY} MB/s"
            " and a power of 2",
        )
    return None


def validate_storage_capacity(value) -> Optional[Violation]:
    if _is_token(value):
        return None
    if (
        not _is_int(value)
        or value < MIN_STORAGE_CAPACITY_GIB
        or value > MAX_STORAGE_CAPACITY_GIB
    ):
        return Violation(
            "storage capacity",
            f"must be between {MIN_STORAGE_CAPACITY_GIB} and {MAX_STORAGE_CAPACITY_GIB} GiB",
        )
    return None


def validate_active_directory_id(value: Optional[str]) -> Optional[Violation]:
    if value is None or _is_token(value):
        return None
    if not ACTIVE_DIRECTORY_ID_PATTERN.match(value):
        return Violation(
            "active directory id", "must be 'd-' followed by 10 lowercase hexadecimal digits"
        )
    return None


def validate_aliases(value: Optional[Sequence[str]]) -> Optional[Violation]:
    if value is not None and len(value) > MAX_ALIASES:
        return Violation("aliases", f"must contain at most {MAX_ALIASES} entries")
    return None


def validate_preferred_subnet_id(
    value: Optional[str], deployment_type: WindowsDeploymentType
) -> Optional[Violation]:
    """A preferred subnet is mandatory for Multi-AZ and optional otherwise"""
    if deployment_type is WindowsDeploymentType.MULTI_AZ_1 and not value:
        return Violation(
            "preferred subnet id", "is required when the deployment type is MULTI_AZ_1"
        )
    return None


def validate_dns_ips(value: Optional[Sequence[str]]) -> Optional[Violation]:
    if value is not None and len(value) > MAX_DNS_IPS:
        return Violation("dns ips", f"must contain at most {MAX_DNS_IPS} entries")
    return None


def validate_domain_name(value: Optional[str]) -> Optional[Violation]:
    return _validate_text("domain name", value, 255)


def validate_file_system_administrators_group(value: Optional[str]) -> Optional[Violation]:
    return _validate_text("file system administrators group", value, 256)


def validate_organizational_unit_distinguished_name(
    value: Optional[str],
) -> Optional[Violation]:
    return _validate_text("organizational unit distinguished name", value, 2000)


def validate_password(value: Optional[str]) -> Optional[Violation]:
    return _validate_text("password", value, 256, allow_separators=True)


def validate_username(value: Optional[str]) -> Optional[Violation]:
    return _validate_text("username", value, 256)


def validate_audit_log_destination(value: Optional[str]) -> Optional[Violation]:
    if value is None or _is_token(value):
        return None
    if not ARN_PATTERN.match(value):
        return Violation(
            "audit log destination",
            "must be an ARN (arn:partition:service:region:account:resource) "
            "whose resource does not start with '/'",
        )
    return None


def validate_automatic_backup_retention(value: Optional[Duration]) -> Optional[Violation]:
    if value is None or value.is_unresolved():
        return None
    days = value.to_days(integral=False)
    if days != int(days) or days < 0 or days > MAX_BACKUP_RETENTION_DAYS:
        return Violation(
            "automatic backup retention",
            f"must be a whole number of days between 0 and {MAX_BACKUP_RETENTION_DAYS}",
        )
    return None


def iter_violations(props: "WindowsFileSystemProps") -> Iterator[Violation]:
    """Run every validator in a fixed order, lazily yielding each violation"""
    windows = props.windows_configuration
    checks = [
        lambda: validate_throughput_capacity(windows.throughput_capacity),
        lambda: validate_storage_capacity(props.storage_capacity_gib),
        lambda: validate_active_directory_id(windows.active_directory_id),
        lambda: validate_aliases(windows.aliases),
        lambda: validate_preferred_subnet_id(windows.preferred_subnet_id, windows.deployment_type),
    ]

    directory = windows.self_managed_active_directory_configuration
    if directory is not None:
        checks += [
            lambda: validate_dns_ips(directory.dns_ips),
            lambda: validate_domain_name(directory.domain_name),
            lambda: validate_file_system_administrators_group(
                directory.file_system_administrators_group
            ),
            lambda: validate_organizational_unit_distinguished_name(
                directory.organizational_unit_distinguished_name
            ),
            lambda: validate_password(directory.password),
            lambda: validate_username(directory.username),
        ]

    audit = windows.audit_log_configuration
    if audit is not None:
        checks.append(lambda: validate_audit_log_destination(audit.audit_log_destination))

    checks.append(lambda: validate_automatic_backup_retention(windows.automatic_backup_retention))

    for check in checks:
        violation = check()
        if violation is not None:
            yield violation


def collect_violations(props: "WindowsFileSystemProps") -> List[Violation]:
    """Every violation of the props, for callers that want the full report"""
    return list(iter_violations(props))


def validate_windows_file_system_props(props: "WindowsFileSystemProps") -> None:
    """Raise ValidationError for the first violated constraint"""
    violation = next(iter_violations(props), None)
    if violation is not None:
        logger.debug(
            "file_system_validation_failed", field=violation.field, reason=violation.message
        )
        raise ValidationError(str(violation), field=violation.field)
