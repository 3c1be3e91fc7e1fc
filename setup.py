from setuptools import setup
from pathlib import Path


REQUIREMENTS_DIR = Path(__file__).parent / "requirements"


def read_requirements(name: str) -> list:
    """Requirement lines of ``requirements/<name>.txt``, skipping comments."""
    path = REQUIREMENTS_DIR / f"{name}.txt"
    if not path.exists():
        return []

    with open(path, encoding="utf-8") as f:
        return [
            line.strip()
            for line in f
            if line.strip() and not line.startswith("#")
        ]


setup(
    install_requires=read_requirements("runtime"),
    extras_require={
        extra: read_requirements(extra)
        for extra in ("test", "docs")
    },
)
