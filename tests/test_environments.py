import pytest
from config.environments import (
    DEVELOPMENT_CONFIG,
    ENVIRONMENTS,
    PRODUCTION_CONFIG,
    get_environment_config,
)
from fsx_windows import BackupStartTime, MaintenanceTime, WindowsStorageType
from fsx_windows.validators import (
    validate_active_directory_id,
    validate_storage_capacity,
    validate_throughput_capacity,
)


class TestEnvironmentConfig:
    """Test environment configuration"""

    def test_production_config(self):
        """Test production configuration is valid"""
        config = PRODUCTION_CONFIG

        assert config.environment_name == "production"
        assert config.region.region == "ap-southeast-2"
        assert config.file_system.storage_type is WindowsStorageType.SSD
        assert config.retain_on_delete is True
        assert config.enable_audit_logs is True

    @pytest.mark.parametrize("config", list(ENVIRONMENTS.values()))
    def test_file_system_settings_are_valid(self, config):
        """Test every environment passes the file system validators"""
        fs_config = config.file_system

        assert validate_throughput_capacity(fs_config.throughput_capacity) is None
        assert validate_storage_capacity(fs_config.storage_capacity_gib) is None
        assert validate_active_directory_id(fs_config.active_directory_id) is None
        BackupStartTime(hour=fs_config.backup_start_hour, minute=fs_config.backup_start_minute)
        MaintenanceTime(
            day=fs_config.maintenance_day,
            hour=fs_config.maintenance_hour,
            minute=fs_config.maintenance_minute,
        )

    def test_vpc_cidrs_are_different(self):
        """Test VPC CIDRs don't overlap"""
        assert PRODUCTION_CONFIG.region.vpc_cidr != DEVELOPMENT_CONFIG.region.vpc_cidr

    def test_lookup_by_name(self):
        assert get_environment_config("development") is DEVELOPMENT_CONFIG

    def test_unknown_environment(self):
        with pytest.raises(KeyError, match="Unknown environment 'staging'"):
            get_environment_config("staging")
