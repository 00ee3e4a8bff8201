from pathlib import Path

from platformdirs import user_config_path


def user_config_file(app_name: str, filename: str) -> Path:
    """Return the per-user location for an application's config file.

    For example ``user_config_file("myapp", "settings.toml")`` gives
    ``~/.config/myapp/settings.toml`` on Linux. Nothing is created.

    Args:
        app_name: Application name used as the directory name.
        filename: Name of the configuration file.

    Returns:
        Path: Path of the file inside the user config directory.
    """
    return user_config_path(app_name, appauthor=False) / filename
