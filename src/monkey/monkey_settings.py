"""Settings for the Monkey REPL and command-line tool."""

from dataclasses import asdict, dataclass
import json
import os


@dataclass
class MonkeySettings:
    """
    User-adjustable settings.

    Attributes:
        prompt: Text written before each REPL read
        filename: Source name reported in diagnostics for REPL input
        show_face: Whether parser error reports include the monkey face
        log_level: Name of the logging level used by the command-line tool
    """
    prompt: str = ">> "
    filename: str = "<stdin>"
    show_face: bool = True
    log_level: str = "WARNING"

    @classmethod
    def create_default(cls) -> "MonkeySettings":
        """Create a new MonkeySettings object with default values."""
        return cls()

    @classmethod
    def load(cls, path: str) -> "MonkeySettings":
        """
        Load settings from a JSON file.

        Keys missing from the file keep their defaults and unknown keys are ignored.
        A `show_face` value that is not a JSON boolean is ignored.

        Args:
            path: Path to the settings file

        Returns:
            MonkeySettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            OSError: If the file cannot be read
        """
        settings = cls.create_default()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        settings.prompt = str(data.get("prompt", settings.prompt))
        settings.filename = str(data.get("filename", settings.filename))
        show_face = data.get("show_face")
        if isinstance(show_face, bool):
            settings.show_face = show_face

        settings.log_level = str(data.get("log_level", settings.log_level)).upper()
        return settings

    def save(self, path: str) -> None:
        """
        Save settings to a JSON file, creating the parent directory if needed.

        Args:
            path: Path to save settings file
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self), f, indent=2)
