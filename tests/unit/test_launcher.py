"""
Unit tests for the flubr bot launcher.

Tests verify:
- secrets.env parsing (export prefix, quotes, comments, SOPS lines)
- Existing environment variables are never overridden
- Missing configuration exits with status 1
"""

import os
import pytest

from flubr_bot import FlubrBotService

SECRETS = """
# flubr secrets
export FLUBR_SLACK_TOKEN="xoxb-from-file"
FLUBR_SLACK_APP_TOKEN='xapp-from-file'
FLUBR_URL=http://flubr.test
FLUBR_PASS=ENC[AES256_GCM,data:abc]
not a setting
FLUBR_FAIL=failed|broken
"""


@pytest.fixture
def clean_env(monkeypatch):
    for var in [
        "FLUBR_SLACK_TOKEN",
        "FLUBR_SLACK_APP_TOKEN",
        "FLUBR_URL",
        "FLUBR_PASS",
        "FLUBR_FAIL",
        "FLUBR_HTTP_TIMEOUT",
        "FLUBR_AUTO_RECONNECT",
        "FLUBR_LOG_LEVEL",
        "FLUBR_LOG_FILE",
    ]:
        # setenv first so teardown removes anything load_secrets writes
        monkeypatch.setenv(var, "unset")
        monkeypatch.delenv(var)
    return monkeypatch


@pytest.mark.unit
class TestLoadSecrets:
    """secrets.env loading"""

    def test_parses_file(self, tmp_path, clean_env):
        secrets_file = tmp_path / "secrets.env"
        secrets_file.write_text(SECRETS)

        FlubrBotService(secrets_file=secrets_file).load_secrets()

        assert os.environ["FLUBR_SLACK_TOKEN"] == "xoxb-from-file"
        assert os.environ["FLUBR_SLACK_APP_TOKEN"] == "xapp-from-file"
        assert os.environ["FLUBR_URL"] == "http://flubr.test"
        assert os.environ["FLUBR_FAIL"] == "failed|broken"
        assert "FLUBR_PASS" not in os.environ

    def test_environment_wins(self, tmp_path, clean_env):
        clean_env.setenv("FLUBR_URL", "http://from-env.test")
        secrets_file = tmp_path / "secrets.env"
        secrets_file.write_text(SECRETS)

        FlubrBotService(secrets_file=secrets_file).load_secrets()

        assert os.environ["FLUBR_URL"] == "http://from-env.test"

    def test_exported_tokens_kept_other_settings_loaded(self, tmp_path, clean_env):
        clean_env.setenv("FLUBR_SLACK_TOKEN", "xoxb-env")
        clean_env.setenv("FLUBR_SLACK_APP_TOKEN", "xapp-env")
        secrets_file = tmp_path / "secrets.env"
        secrets_file.write_text(SECRETS)

        FlubrBotService(secrets_file=secrets_file).load_secrets()

        assert os.environ["FLUBR_SLACK_TOKEN"] == "xoxb-env"
        assert os.environ["FLUBR_SLACK_APP_TOKEN"] == "xapp-env"
        assert os.environ["FLUBR_URL"] == "http://flubr.test"
        assert os.environ["FLUBR_FAIL"] == "failed|broken"

    def test_missing_file_is_tolerated(self, tmp_path, clean_env):
        FlubrBotService(secrets_file=tmp_path / "absent.env").load_secrets()


@pytest.mark.unit
class TestLoadConfig:
    """Startup validation"""

    def test_missing_config_exits(self, clean_env, capsys):
        with pytest.raises(SystemExit) as exc_info:
            FlubrBotService().load_config()

        assert exc_info.value.code == 1
        assert "FLUBR_SLACK_TOKEN" in capsys.readouterr().out

    def test_valid_config(self, clean_env, flubr_env):
        for key, value in flubr_env.items():
            clean_env.setenv(key, value)

        config = FlubrBotService().load_config()

        assert config.flubr_url == "http://flubr.test"
