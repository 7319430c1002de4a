import pytest
from pathlib import Path

from seedance_relay.models.config import load_config, parse_config, CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH


VALID_CONFIG = """
secrets:
  type: gcp_secret_manager
  secret_name: Replicate_APIKey
  settings:
    project_id: "123456"

providers:
  replicate:
    type: replicate
    settings:
      timeout: 30

generation:
  provider: replicate
  model: bytedance/seedance-1-lite
"""


class TestConfig:

    @pytest.fixture
    def valid_config(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(VALID_CONFIG)
        return config_file

    def test_load_valid_config(self, valid_config):
        config = load_config(valid_config)

        assert config.secrets.type == "gcp_secret_manager"
        assert config.secrets.settings == {"project_id": "123456"}
        assert config.secrets.cache is False
        assert config.provider.settings == {"timeout": 30}
        assert config.generation.model == "bytedance/seedance-1-lite"
        assert config.generation.default_resolution == "480p"
        assert config.expose_error_details is True

    def test_env_var_overrides_path(self, valid_config, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(valid_config))

        config = load_config()

        assert config.secrets.settings["project_id"] == "123456"

    def test_bundled_config_is_valid(self):
        config = load_config(DEFAULT_CONFIG_PATH)

        assert config.generation.default_resolution == "480p"
        assert config.secrets.secret_name == "Replicate_APIKey"

    def test_default_config_ships_inside_package(self):
        import seedance_relay

        package_dir = Path(seedance_relay.__file__).parent
        assert DEFAULT_CONFIG_PATH == package_dir / "config" / "config.yaml"
        assert DEFAULT_CONFIG_PATH.exists()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    @pytest.mark.parametrize("section", ["secrets", "providers", "generation"])
    def test_missing_section(self, section):
        raw = {
            "secrets": {"type": "env"},
            "providers": {"replicate": {"type": "replicate"}},
            "generation": {"provider": "replicate"},
        }
        del raw[section]

        with pytest.raises(ValueError, match=section):
            parse_config(raw)

    def test_unknown_provider_reference(self):
        with pytest.raises(ValueError, match="unknown provider"):
            parse_config({
                "secrets": {"type": "env"},
                "providers": {"replicate": {"type": "replicate"}},
                "generation": {"provider": "other"},
            })

    def test_unknown_secrets_type(self):
        with pytest.raises(ValueError, match="Unknown secrets type"):
            parse_config({
                "secrets": {"type": "vault"},
                "providers": {"replicate": {"type": "replicate"}},
                "generation": {"provider": "replicate"},
            })
