"""LocalDrive: sandboxed remote-storage style API over a host directory."""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from typing import BinaryIO, Optional, Union

from localdrive.controller import FileSystemController
from localdrive.errors import LocalDriveError, NotFoundError
from localdrive.local import ListingEngine, PathResolver, resolve_name
from localdrive.local.validators import (
    validate_access,
    validate_entry_name,
    validate_no_cycle,
    validate_not_root,
)
from localdrive.models import DriveConfig, DriveStats, Entry, ListConfig, OperationConfig
from localdrive.policy import Operation, Policy, build_policy

logger = logging.getLogger(__name__)


class LocalDrive:
    """
    Drive facade over a single root directory.

    Every public call resolves the virtual id to a host path, checks the
    policy (ForceRootPolicy first, then the caller's policy) and only then
    touches the filesystem.
    """

    def __init__(
        self,
        root: str,
        policy: Optional[Policy] = None,
        config: Optional[DriveConfig] = None,
    ) -> None:
        self._resolver = PathResolver(root)
        self._policy = build_policy(self._resolver.root, policy)
        self._config = config or DriveConfig()
        self._controller = FileSystemController()
        self._engine = ListingEngine(self._controller, self._resolver)

    @classmethod
    def from_controller(
        cls,
        root: str,
        controller: FileSystemController,
        policy: Optional[Policy] = None,
        config: Optional[DriveConfig] = None,
    ) -> "LocalDrive":
        """Create a drive with an injected controller (useful for tests)."""
        obj = cls(root, policy=policy, config=config)
        obj._controller = controller
        obj._engine = ListingEngine(controller, obj._resolver)
        return obj

    @property
    def root(self) -> str:
        return self._resolver.root

    @property
    def policy(self) -> Policy:
        return self._policy

    # ----------------------------
    # Read APIs
    # ----------------------------
    def list(self, id: str = "/", config: Optional[ListConfig] = None) -> list[Entry]:
        self._trace("List %s with %r", id, config)
        path = self._authorize(id, Operation.READ)
        return self._engine.list(path, self._effective_list_config(config))

    def search(
        self,
        id: str,
        query: str,
        config: Optional[ListConfig] = None,
    ) -> list[Entry]:
        """
        List the subtree of id, keeping entries whose name contains query
        (case-insensitive). An empty query is a plain list().
        """
        self._trace("Search %r in %s", query, id)
        if not query:
            return self.list(id, config)

        needle = query.lower()
        cfg = replace(config or ListConfig(), sub_folders=True)
        cfg = cfg.with_include(lambda entry: needle in entry.name.lower())
        return self.list(id, cfg)

    def info(self, id: str) -> Entry:
        path = self._authorize(id, Operation.READ)
        return self._engine.entry_for(path)

    def exists(self, id: str) -> bool:
        path = self._authorize(id, Operation.READ)
        return self._controller.path_exists(path)

    def read(self, id: str) -> BinaryIO:
        """Open the file for binary reading. The caller closes the stream."""
        self._trace("Get content of %s", id)
        path = self._authorize(id, Operation.READ)
        return self._controller.open_read(path)

    def stats(self) -> DriveStats:
        """Used/free bytes of the root volume; zeros when the host can't tell."""
        try:
            used, free = self._controller.disk_usage(self.root)
        except LocalDriveError as exc:
            logger.debug("Disk usage unavailable for %s: %s", self.root, exc)
            return DriveStats()
        return DriveStats(used=used, free=free)

    # ----------------------------
    # Write APIs
    # ----------------------------
    def write(
        self,
        id: str,
        data: Union[bytes, BinaryIO],
        config: Optional[OperationConfig] = None,
    ) -> str:
        """Write data to id and return the id actually written."""
        self._trace("Save content to %s", id)
        path = self._authorize(id, Operation.WRITE)

        if config is not None and config.prevent_name_collision:
            path = self._free_path(path, is_folder=False)
            validate_access(self._policy, path, Operation.WRITE)

        self._controller.write_stream(path, data)
        return self._resolver.to_id(path)

    def mkdir(self, id: str) -> str:
        """Create a folder (and missing parents)."""
        self._trace("Make folder %s", id)
        path = self._authorize(id, Operation.WRITE)
        self._controller.ensure_dir(path)
        return self._resolver.to_id(path)

    def make(
        self,
        parent_id: str,
        name: str,
        is_folder: bool = False,
        config: Optional[OperationConfig] = None,
    ) -> str:
        """Create an empty file or a folder named name inside parent_id."""
        self._trace("Make entity %s %s", parent_id, name)
        validate_entry_name(name)
        parent = self._authorize(parent_id, Operation.WRITE)

        if config is not None and config.prevent_name_collision:
            name = resolve_name(set(self._controller.read_dir(parent)), name, is_folder)

        path = os.path.join(parent, name)
        validate_access(self._policy, path, Operation.WRITE)

        if is_folder:
            self._controller.ensure_dir(path)
        else:
            self._controller.create_file(path)
        return self._resolver.to_id(path)

    def copy(
        self,
        source_id: str,
        target_id: str,
        config: Optional[OperationConfig] = None,
    ) -> str:
        """
        Copy source to target and return the id of the copy.

        If target is an existing folder the copy is placed inside it under
        the source's name.
        """
        self._trace("Copy %s to %s", source_id, target_id)
        source = self._authorize(source_id, Operation.READ)
        destination = self._authorize(target_id, Operation.WRITE)

        final = self._transfer_target(source, destination, config, "COPY")
        self._controller.copy(source, final)
        return self._resolver.to_id(final)

    def move(
        self,
        source_id: str,
        target_id: str,
        config: Optional[OperationConfig] = None,
    ) -> str:
        """
        Move source to target and return the new id.

        If target is an existing folder the entry is moved inside it.
        """
        self._trace("Move %s to %s", source_id, target_id)
        source = self._authorize(source_id, Operation.READ)
        validate_access(self._policy, source, Operation.WRITE)
        validate_not_root(self.root, source, "MOVE")
        destination = self._authorize(target_id, Operation.WRITE)

        final = self._transfer_target(source, destination, config, "MOVE")
        self._controller.move(source, final)
        return self._resolver.to_id(final)

    def remove(self, id: str) -> None:
        self._trace("Delete %s", id)
        path = self._authorize(id, Operation.WRITE)
        validate_not_root(self.root, path, "REMOVE")
        self._controller.remove(path)

    # ----------------------------
    # Internals
    # ----------------------------
    def _authorize(self, id: str, operation: Operation) -> str:
        path = self._resolver.to_host(id)
        validate_access(self._policy, path, operation)
        return path

    def _transfer_target(
        self,
        source: str,
        destination: str,
        config: Optional[OperationConfig],
        action: str,
    ) -> str:
        if not self._controller.path_exists(source):
            raise NotFoundError("Source does not exist",
                                details={"id": self._resolver.to_id(source)})
        source_is_folder = self._controller.is_dir(source)

        final = destination
        if self._controller.is_dir(destination):
            final = os.path.join(destination, os.path.basename(source))

        if config is not None and config.prevent_name_collision:
            final = self._free_path(final, is_folder=source_is_folder)

        validate_access(self._policy, final, Operation.WRITE)
        if source_is_folder:
            validate_no_cycle(source, final, action)
        return final

    def _free_path(self, path: str, *, is_folder: bool) -> str:
        parent, name = os.path.split(path)
        existing = set(self._controller.read_dir(parent))
        return os.path.join(parent, resolve_name(existing, name, is_folder))

    def _effective_list_config(self, config: Optional[ListConfig]) -> ListConfig:
        cfg = config or ListConfig()
        if self._config.exclude is not None:
            cfg = cfg.with_exclude(self._config.exclude)
        return cfg

    def _trace(self, msg: str, *args: object) -> None:
        level = logging.INFO if self._config.verbose else logging.DEBUG
        logger.log(level, msg, *args)
