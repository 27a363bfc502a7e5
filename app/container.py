"""Dependency Injection container - initialized at app startup."""

from pathlib import Path

from app.repositories.polls import PollRepository
from app.repositories.reference import ReferenceRepository
from app.services.metrics import ProfileService
from app.services.polls import PollService
from app.services.scoring import CalculatorService
from settings import DATA_DIR


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, data_dir: Path | str = DATA_DIR) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self._reference_repo = ReferenceRepository(data_dir)
        self._poll_repo = PollRepository(data_dir)

        # Services (with injected repos)
        self.calculator = CalculatorService(repo=self._reference_repo)
        self.profiles = ProfileService(repo=self._reference_repo)
        self.polls = PollService(repo=self._poll_repo)

        self._initialized = True

    def reset(self) -> None:
        """Forget all instances; the next init() rebuilds them."""
        self._initialized = False

    @property
    def reference(self) -> ReferenceRepository:
        return self._reference_repo


# Global container instance
container = Container()
