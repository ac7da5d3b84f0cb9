import shutil
from pathlib import Path


class DiskGuard:
    """
    Keeps file sinks from filling the disk.
    """
    @staticmethod
    def check_space(estimated_bytes: int, threshold_gb: float = 1, path: str = ".") -> bool:
        """
        Verifica si hay suficiente espacio libre (threshold + estimado).
        """
        free_bytes = shutil.disk_usage(path).free
        needed_bytes = estimated_bytes + int(threshold_gb * 1024**3)

        return free_bytes >= needed_bytes

    @staticmethod
    def estimate_size(rows: int, avg_row_bytes: int = 100) -> int:
        """
        Rough heuristic: rows times average bytes per row.
        """
        return max(rows, 0) * avg_row_bytes

    @staticmethod
    def nearest_existing(path: Path) -> Path:
        """First existing ancestor of `path`, for disk_usage on new files."""
        for candidate in [path, *path.parents]:
            if candidate.exists():
                return candidate
        return Path(".")
