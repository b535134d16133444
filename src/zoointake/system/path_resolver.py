from pathlib import Path


class PathResolver:
    """Central authority for all file path resolution in zoo intake.

    File names are fixed; only the directory they are resolved against can
    change, which defaults to the current working directory.
    """

    NAMES_FILENAME = "animalNames.txt"
    ARRIVALS_FILENAME = "arrivingAnimals.txt"
    REPORT_FILENAME = "newAnimals.txt"
    CONFIG_FILENAME = "zoo.yaml"

    def __init__(self, base_dir: Path | None = None) -> None:
        self.base_dir = base_dir if base_dir is not None else Path.cwd()

    def get_names_path(self) -> Path:
        """Get the path to the species names catalog."""
        return self.base_dir / self.NAMES_FILENAME

    def get_arrivals_path(self) -> Path:
        """Get the path to the arriving animals records."""
        return self.base_dir / self.ARRIVALS_FILENAME

    def get_report_path(self) -> Path:
        """Get the path to the cumulative population report."""
        return self.base_dir / self.REPORT_FILENAME

    def get_config_path(self) -> Path:
        """Get the path to the optional configuration file."""
        return self.base_dir / self.CONFIG_FILENAME
