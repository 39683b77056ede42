"""Keyed storage for loaded resources, grouped by kind."""

from __future__ import annotations

from pathlib import Path

from dgmkit.errors import DgmError


def _file_name_id(path):
    return Path(path).name


class ResourceManager:
    """Holds resources loaded from disk or inserted directly.

    Resources are grouped by ``kind`` (usually their class) and addressed
    by a string id within that kind. Ids of loaded files come from
    ``resource_id_func``, which defaults to the file name.
    """

    def __init__(self, resource_id_func=None):
        self._id_func = resource_id_func if resource_id_func is not None else _file_name_id
        self._data = {}

    def get(self, kind, resource_id):
        """Return the resource of ``kind`` stored under ``resource_id``."""
        if not self.has_resource(kind, resource_id):
            raise DgmError(f"Resource with id '{resource_id}' is not loaded.")
        return self._data[kind][resource_id]

    def has_resource(self, kind, resource_id):
        """True when a resource of ``kind`` is stored under ``resource_id``."""
        return resource_id in self._data.get(kind, {})

    def get_resource_id(self, path):
        """Return the id a resource loaded from ``path`` is stored under."""
        try:
            return str(self._id_func(Path(path)))
        except DgmError:
            raise
        except Exception as exc:
            raise DgmError(f"Cannot compute resource id. Reason: {exc}") from exc

    def load_resource(self, kind, path, load_callback):
        """Load a resource with ``load_callback(path)`` and store it.

        Raises ``DgmError`` if the id is taken or loading fails.
        """
        path = Path(path)
        resource_id = self.get_resource_id(path)
        if self.has_resource(kind, resource_id):
            raise DgmError(
                f"Resource with id '{resource_id}' is already loaded in the manager."
            )
        try:
            resource = load_callback(path)
        except DgmError:
            raise
        except Exception as exc:
            raise DgmError(f"Unable to load resource. Reason: {exc}") from exc
        self._data.setdefault(kind, {})[resource_id] = resource
        return resource_id

    def insert_resource(self, kind, resource_id, resource):
        """Store an already built resource under ``resource_id``."""
        if self.has_resource(kind, resource_id):
            raise DgmError(
                f"Resource with id '{resource_id}' is already loaded in the manager."
            )
        self._data.setdefault(kind, {})[resource_id] = resource

    def unload_resource(self, kind, resource_id):
        """Remove the resource of ``kind`` stored under ``resource_id``."""
        resources = self._data.get(kind)
        if resources is None or resource_id not in resources:
            raise DgmError(
                f"Unloading resource failed. Reason: Id '{resource_id}' is not loaded"
            )
        del resources[resource_id]

    def load_resources_from_directory(
        self, kind, folder_path, load_callback, allowed_extensions=()
    ):
        """Load every entry of ``folder_path`` whose suffix ends with an allowed extension.

        The directory is not searched recursively. Returns the ids loaded.
        """
        extensions = list(allowed_extensions)
        if not extensions:
            raise DgmError("Allowed extensions must not be empty!")
        folder = Path(folder_path)
        if not folder.is_dir():
            raise DgmError(f"Path '{folder}' is not a directory!")
        loaded = []
        for item in sorted(folder.iterdir()):
            if any(item.suffix.endswith(ext) for ext in extensions):
                loaded.append(self.load_resource(kind, item, load_callback))
        return loaded

    def loaded_resource_ids(self, kind):
        """Return the ids of all resources stored for ``kind``."""
        return list(self._data.get(kind, {}))