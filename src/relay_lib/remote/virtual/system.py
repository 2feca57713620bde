# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import threading
from dataclasses import replace
from datetime import datetime
from pathlib import Path

import yaml

from relay_lib.core.common import load_yaml_dumper, load_yaml_loader
from relay_lib.core.error import MalformedInputError
from relay_lib.properties.actor import Actor
from relay_lib.properties.job import JobKind, JobStatus, JobSummary
from relay_lib.properties.platform import AppPlatform

SafeLoader: type[yaml.SafeLoader] = load_yaml_loader()
Dumper: type[yaml.Dumper] = load_yaml_dumper()


class VirtualServiceError(Exception):
    """Common exception type for Virtual Service errors."""

    pass


class VirtualService:
    """
    A virtual remote build service for testing purposes.

    Jobs and application records are stored in dictionaries guarded by a lock.
    If `state_file` is provided, the state is loaded from it on creation
    and written back after every modification.
    """

    def __init__(self, state_file: Path | None = None):
        """Initialize the Virtual Service instance."""
        self.actor = Actor("virtual-user")
        self.jobs: dict[str, JobSummary] = {}
        self.apps: dict[str, str] = {}
        self.projects: dict[str, str] = {}
        self.disabled_projects: set[str] = set()
        self._state_file = state_file
        self._lock = threading.Lock()

        if state_file and state_file.is_file():
            self._load(state_file)

    def clear(self):
        """Remove all jobs, application records and projects."""
        with self._lock:
            self.jobs.clear()
            self.apps.clear()
            self.projects.clear()
            self.disabled_projects.clear()
            self._save()

    def setActor(self, actor: Actor):
        """Change the logged-in user."""
        with self._lock:
            self.actor = actor
            self._save()

    def disableProject(self, project_id: str):
        """Prevent the project from using the service."""
        with self._lock:
            self.disabled_projects.add(project_id)
            self._save()

    def isProjectEnabled(self, project_id: str) -> bool:
        with self._lock:
            return project_id not in self.disabled_projects

    def pendingJobId(self, account: str, platform: AppPlatform) -> str | None:
        """Return the identifier of the oldest pending job of the account for the platform."""
        with self._lock:
            for job in self.jobs.values():
                if (
                    job.account == account
                    and job.platform == platform
                    and job.status.isPending
                ):
                    return job.id

        return None

    def jobSummary(self, job_id: str) -> JobSummary:
        with self._lock:
            try:
                return self.jobs[job_id]
            except KeyError:
                raise VirtualServiceError(f"Job '{job_id}' does not exist.")

    def ensureApp(self, bundle_identifier: str) -> str:
        """Return the store identifier of the application, registering it if needed."""
        with self._lock:
            if bundle_identifier not in self.apps:
                self.apps[bundle_identifier] = str(1000000000 + len(self.apps))
                self._save()
            return self.apps[bundle_identifier]

    def createJob(
        self,
        kind: JobKind,
        project_id: str,
        account: str | None,
        platform: AppPlatform,
        profile: str | None = None,
    ) -> JobSummary:
        """Register a new job in a queued state."""
        with self._lock:
            # generate a unique job id
            job_id = f"{kind}-{len(self.jobs)}"
            if job_id in self.jobs:
                raise VirtualServiceError(f"Job '{job_id}' already exists.")

            if account:
                self.projects[project_id] = account

            job = JobSummary(
                id=job_id,
                platform=platform,
                status=JobStatus.IN_QUEUE,
                kind=kind,
                project_id=project_id,
                account=account or self.projects.get(project_id),
                profile=profile,
                initiator=self.actor.username,
                created_at=datetime.now().replace(microsecond=0),
            )
            self.jobs[job_id] = job
            self._save()
            return job

    def setJobStatus(self, job_id: str, status: JobStatus):
        """Change the state of a job."""
        with self._lock:
            if job_id not in self.jobs:
                raise VirtualServiceError(f"Job '{job_id}' does not exist.")
            self.jobs[job_id] = replace(self.jobs[job_id], status=status)
            self._save()

    def _save(self):
        """Write the state into the state file. Must be called with the lock held."""
        if not self._state_file:
            return

        data = {
            "actor": {"username": self.actor.username, "is_admin": self.actor.is_admin},
            "apps": self.apps,
            "projects": self.projects,
            "disabled_projects": sorted(self.disabled_projects),
            "jobs": [job.toDict() for job in self.jobs.values()],
        }
        try:
            self._state_file.write_text(
                yaml.dump(data, default_flow_style=False, sort_keys=False, Dumper=Dumper)
            )
        except OSError as e:
            raise VirtualServiceError(
                f"Could not write the state file '{self._state_file}': {e}"
            ) from e

    def _load(self, state_file: Path):
        try:
            with state_file.open("r") as input:
                data = yaml.load(input, Loader=SafeLoader) or {}
            self.actor = Actor(**data.get("actor", {"username": self.actor.username}))
            self.apps = dict(data.get("apps") or {})
            self.projects = dict(data.get("projects") or {})
            self.disabled_projects = set(data.get("disabled_projects") or [])
            self.jobs = {
                job.id: job
                for job in (JobSummary.fromDict(x) for x in data.get("jobs") or [])
            }
        except (OSError, yaml.YAMLError, TypeError, KeyError, MalformedInputError) as e:
            raise VirtualServiceError(
                f"Could not load the state file '{state_file}': {e}"
            ) from e
