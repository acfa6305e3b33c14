"""
Theme loader for markfolio highlight stylesheets.

The renderer only emits Pygments token classes; what those classes look
like comes from a theme. Each theme is a directory containing:
  - theme.yaml: Configuration (currently the Pygments style for code)

Built-in themes live in the package's themes/ directory.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from pygments.formatters import HtmlFormatter
from pygments.util import ClassNotFound


PACKAGE_THEMES_DIR = Path(__file__).resolve().parent.parent / "themes"


class ThemeError(Exception):
    """Raised when theme loading or validation fails"""
    pass


class Theme:
    """
    Represents a markfolio theme.

    A theme consists of configuration from theme.yaml; the highlight
    stylesheet is generated from its Pygments style.
    """

    def __init__(self, theme_name: str, themes_dir: Optional[str] = None):
        """
        Load a theme by name.

        Args:
            theme_name: Name of the theme directory (e.g., "default", "light")
            themes_dir: Path to themes directory (default: package themes/)

        Raises:
            ThemeError: If theme directory or theme.yaml doesn't exist
        """
        self.name = theme_name
        self.themes_dir = Path(themes_dir) if themes_dir else PACKAGE_THEMES_DIR
        self.theme_dir = self.themes_dir / theme_name

        if not self.theme_dir.is_dir():
            raise ThemeError(
                f"Theme '{theme_name}' not found. "
                f"Expected directory: {self.theme_dir}"
            )

        self.config_path = self.theme_dir / "theme.yaml"
        if not self.config_path.exists():
            raise ThemeError(
                f"Theme '{theme_name}' missing theme.yaml"
            )

        self.config = self._config_load()

    def _config_load(self) -> Dict[str, Any]:
        """Load and parse theme.yaml"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ThemeError(f"Failed to parse theme.yaml: {e}")
        except OSError as e:
            raise ThemeError(f"Failed to load theme.yaml: {e}")

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ThemeError(f"Theme '{self.name}': theme.yaml must be a mapping")
        return config

    def config_get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from theme.yaml.

        Supports nested keys with dot notation:
          theme.config_get('code.pygments_style', 'monokai')

        Args:
            key: Configuration key (supports dot notation)
            default: Default value if key doesn't exist

        Returns:
            Configuration value or default
        """
        keys: list[str] = key.split('.')
        value: Any = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def pygmentsStyle_get(self) -> str:
        """
        Get Pygments style name for syntax highlighting.

        Returns:
            Pygments style name (default: 'monokai')
        """
        return self.config_get('code.pygments_style', 'monokai')

    def stylesheet_generate(self, selector: str = "") -> str:
        """
        Generate CSS for the Pygments token classes the renderer emits.

        Args:
            selector: CSS selector prefixed to every rule (e.g. ".code-block-wrapper")

        Returns:
            Stylesheet text

        Raises:
            ThemeError: If the configured Pygments style does not exist
        """
        style = self.pygmentsStyle_get()
        try:
            formatter = HtmlFormatter(style=style)
        except ClassNotFound:
            raise ThemeError(f"Theme '{self.name}': unknown Pygments style '{style}'")
        return formatter.get_style_defs(selector)

    def __repr__(self) -> str:
        return f"Theme(name='{self.name}', path='{self.theme_dir}')"


def themes_listAvailable(themes_dir: Optional[str] = None) -> list[str]:
    """
    List all available theme names.

    Args:
        themes_dir: Path to themes directory (default: package themes/)

    Returns:
        List of theme names (directory names with valid theme.yaml)
    """
    themes_path: Path = Path(themes_dir) if themes_dir else PACKAGE_THEMES_DIR

    if not themes_path.exists():
        return []

    themes: list[str] = []
    for item in themes_path.iterdir():
        if item.is_dir() and (item / "theme.yaml").exists():
            themes.append(item.name)

    return sorted(themes)
