"""Shared fixtures for the wildconf test-suite.

Every test gets its own user-config directory and log directory so that the
developer's ``~/.wildconf`` never leaks into results, and the
``ConfigManager`` singleton is rebuilt for each test.
"""

import logging
from pathlib import Path

import pytest

from wildconf.config import ConfigManager

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point user config and log directories into the test's tmp dir."""
    user_dir = tmp_path / "user-config"
    user_dir.mkdir()
    monkeypatch.setenv("WILDCONF_CONFIG_DIR", str(user_dir))
    monkeypatch.setenv("WILDCONF_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("WILDCONF_DEBUG_MODULES", raising=False)
    return user_dir


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the ConfigManager singleton and wildconf logging between tests."""
    root = logging.getLogger()
    root_handlers, root_level = list(root.handlers), root.level
    ConfigManager.reset()
    yield
    ConfigManager.reset()
    for handler in list(root.handlers):
        if handler not in root_handlers:
            handler.close()
    root.handlers[:] = root_handlers
    root.setLevel(root_level)
    lib_logger = logging.getLogger("wildconf")
    for handler in list(lib_logger.handlers):
        lib_logger.removeHandler(handler)
        handler.close()
    lib_logger.setLevel(logging.NOTSET)
    lib_logger.propagate = True


@pytest.fixture
def write_config(tmp_path):
    """Factory writing *text* to a config file and returning its path."""
    def _write(text: str, name: str = "app.conf") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8", newline="")
        return path
    return _write
