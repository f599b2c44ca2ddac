"""
Processing Jobs

The core only defines message shapes and hands them to a queue. Delivery is
at-least-once at best; nothing here waits for, polls or retries a job.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ProcessingJob:
    """Derived-variant request for a freshly uploaded entry."""
    owner_id: str
    file_id: str

    def to_dict(self) -> dict:
        return {"owner_id": self.owner_id, "file_id": self.file_id}


@dataclass(frozen=True)
class WelcomeJob:
    """Post-registration request for a new user."""
    user_id: str

    def to_dict(self) -> dict:
        return {"user_id": self.user_id}


class JobQueue(ABC):
    """One-way message boundary to the processing worker."""

    @abstractmethod
    def enqueue_processing(self, job: ProcessingJob) -> None:
        """
        Submit a processing job.

        Raises:
            Exception: Whatever the transport raises; callers decide
                whether a failed submission matters
        """
        pass

    @abstractmethod
    def enqueue_welcome(self, job: WelcomeJob) -> None:
        """Submit a welcome job for a new user."""
        pass


class Thumbnailer(ABC):
    """Writes size variants next to an original image."""

    @abstractmethod
    def generate(self, source_path: str) -> List[str]:
        """
        Write every variant of the image at source_path.

        Returns:
            Paths of the written variants, named `<source_path>_<width>`

        Raises:
            OSError: If the source cannot be read or is not an image
        """
        pass
