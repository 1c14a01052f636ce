import tomllib
from pathlib import Path

from rnstyle_extractor.logger import get_logger
from rnstyle_extractor.models import ExtractorConfig

log = get_logger("config")


class StyleConfig:
    """Handles loading of .rnstyle.toml configuration"""

    def __init__(self, config_path: Path | None = None):
        self.registry_type = "StyleSheet"
        self.factory_method = "create"
        self.registry_identifier = "styles"
        self.style_attribute = "style"
        self.fallback_indent = "    "

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            log.warning("ignoring config file %s: %s", path, e)
            return

        tool = data.get("tool", {})
        section = tool.get("rnstyle", {}) if isinstance(tool, dict) else None
        if not isinstance(section, dict):
            log.warning("ignoring config file %s: [tool.rnstyle] is not a table", path)
            return

        self.registry_type = section.get("registry-type", self.registry_type)
        self.factory_method = section.get("factory-method", self.factory_method)
        self.registry_identifier = section.get("registry-identifier", self.registry_identifier)
        self.style_attribute = section.get("style-attribute", self.style_attribute)
        indent = section.get("fallback-indent", self.fallback_indent)
        # An integer means that many spaces
        self.fallback_indent = " " * indent if isinstance(indent, int) else indent

    def to_extractor_config(self) -> ExtractorConfig:
        return ExtractorConfig(
            registry_type=self.registry_type,
            factory_method=self.factory_method,
            registry_identifier=self.registry_identifier,
            style_attribute=self.style_attribute,
            fallback_indent=self.fallback_indent,
        )
