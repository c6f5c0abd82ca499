"""A profile store that keeps one YAML file per profile in a directory."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from mws.profile import Profile

FILE_TYPE = ".yaml"


class RepositoryError(Exception):
    """Base error of the profile repository."""


class InvalidNameError(RepositoryError, ValueError):
    """The profile name is empty or could escape the profile directory."""

    def __init__(self, message: str = "недопустимое имя") -> None:
        super().__init__(message)


class DirNotSpecifiedError(RepositoryError, ValueError):
    """No profile directory was given."""

    def __init__(self, message: str = "директория не указана") -> None:
        super().__init__(message)


class ProfileNotFoundError(RepositoryError, LookupError):
    """The requested profile file does not exist."""


def is_name_valid(name: str) -> bool:
    """Tell whether a profile name is safe to use as a file name."""
    return bool(name) and ".." not in name and "/" not in name


class ProfileYAMLRepo:
    """Create, read, list and delete profiles stored as YAML files."""

    def __init__(self, base_dir: str | os.PathLike[str]) -> None:
        if not base_dir:
            raise DirNotSpecifiedError()
        base_dir = os.fspath(base_dir)
        try:
            clean_dir = os.path.abspath(base_dir)
        except ValueError as exc:
            raise RepositoryError(
                f"не удалось получить абсолютный путь для '{base_dir}': {exc}"
            ) from exc
        try:
            os.makedirs(clean_dir, mode=0o755, exist_ok=True)
        except (OSError, ValueError) as exc:
            raise RepositoryError(
                f"не удалось создать или получить доступ к директории '{clean_dir}': {exc}"
            ) from exc
        self.base_dir = Path(base_dir)
        self.file_type = FILE_TYPE

    def _path(self, name: str) -> Path:
        if not is_name_valid(name):
            raise InvalidNameError()
        return self.base_dir / f"{name}{self.file_type}"

    def create(self, profile: Profile) -> None:
        """Write a profile to its file, replacing any earlier one."""
        path = self._path(profile.name)
        text = yaml.safe_dump(profile.to_dict(), sort_keys=False, allow_unicode=True)
        path.write_text(text, encoding="utf-8")

    def get(self, name: str) -> Profile:
        """Read the profile with the given name."""
        path = self._path(name)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ProfileNotFoundError(f"профиль {name} не найден") from exc
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise RepositoryError(f"не удалось разобрать профиль {name}: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise RepositoryError(f"профиль {name} имеет неверный формат")
        return Profile.from_dict(name, data)

    def delete(self, name: str) -> None:
        """Remove the profile file with the given name."""
        path = self._path(name)
        if not path.exists():
            file_name = f"{name}{self.file_type}"
            raise ProfileNotFoundError(
                f"профиль с именем {file_name} не существует, папка {self.base_dir}"
            )
        path.unlink()

    def list(self) -> list[Profile]:
        """Return every readable profile in the directory, ordered by file name."""
        with os.scandir(self.base_dir) as entries:
            names = sorted(
                entry.name
                for entry in entries
                if not entry.is_dir() and entry.name.endswith(self.file_type)
            )
        profiles = []
        for file_name in names:
            try:
                profiles.append(self.get(file_name[: -len(self.file_type)]))
            except (RepositoryError, OSError, UnicodeDecodeError):
                continue
        return profiles