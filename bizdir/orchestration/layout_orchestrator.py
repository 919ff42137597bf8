"""
Page shell state: which chrome to render for the current route and session,
the profile modal state machine, and route-change notifications.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol

from bizdir.services.session import SessionContext
from bizdir.utils.logger import get_logger

logger = get_logger()

AUTH_ROUTE_PREFIX = "/auth/"
BROWSE_PATH = "/browse"


class RouteCategory(str, Enum):
    AUTH = "authRoute"
    NORMAL = "normalRoute"


def classify_route(path: str | None) -> RouteCategory:
    """Auth pages live under /auth/ and render without chrome."""
    if path and path.startswith(AUTH_ROUTE_PREFIX):
        return RouteCategory.AUTH
    return RouteCategory.NORMAL


class Router(Protocol):
    @property
    def current_path(self) -> str: ...

    def navigate(self, path: str) -> None: ...


class AnimationRefresher(Protocol):
    def init(self) -> None: ...

    def refresh(self) -> None: ...


class InMemoryRouter:
    def __init__(self, path: str = "/") -> None:
        self._path = path
        self.history: list[str] = [path]

    @property
    def current_path(self) -> str:
        return self._path

    def navigate(self, path: str) -> None:
        self._path = path
        self.history.append(path)


RouteObserver = Callable[[str, RouteCategory], None]


@dataclass(frozen=True)
class ChromeVisibility:
    route_category: RouteCategory
    show_nav: bool
    show_footer: bool
    show_profile_modal: bool


class LayoutOrchestrator:
    """
    Decides nav/footer/modal presence from route, session and modal_open.

    Route changes are pushed with sync_route(); each change is emitted to the
    registered observers (the animation refresher is registered by default).
    """

    def __init__(
        self,
        session: SessionContext,
        router: Router,
        animation: AnimationRefresher | None = None,
    ) -> None:
        self._session = session
        self._router = router
        self._animation = animation
        self._observers: list[RouteObserver] = []
        self._modal_open = False
        self._mounted = False
        self._path: str | None = None
        self._category = classify_route(router.current_path)
        if animation is not None:
            self.add_route_observer(lambda _path, _category: animation.refresh())

    @property
    def modal_open(self) -> bool:
        return self._modal_open

    @property
    def route_category(self) -> RouteCategory:
        return self._category

    @property
    def current_path(self) -> str | None:
        return self._path

    def add_route_observer(self, observer: RouteObserver) -> None:
        self._observers.append(observer)

    def remove_route_observer(self, observer: RouteObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def mount(self) -> None:
        """Initialize the animation collaborator once and sync the first route."""
        if self._mounted:
            return
        self._mounted = True
        if self._animation is not None:
            self._animation.init()
        self.sync_route()

    def sync_route(self, path: str | None = None) -> bool:
        """
        Record the current route. Returns True when it changed, in which case
        observers have been notified.
        """
        if path is None:
            path = self._router.current_path
        if path == self._path:
            return False
        self._path = path
        self._category = classify_route(path)
        logger.debug("Route changed to %s (%s)", path, self._category.value)
        for observer in list(self._observers):
            try:
                observer(path, self._category)
            except Exception as e:
                logger.warning("Route observer failed for %s: %s", path, e)
        return True

    def chrome(self) -> ChromeVisibility:
        normal = self._category is RouteCategory.NORMAL
        return ChromeVisibility(
            route_category=self._category,
            show_nav=normal,
            show_footer=normal,
            show_profile_modal=self._modal_open and normal and self._session.user is not None,
        )

    def profile_click(self) -> None:
        if self._category is not RouteCategory.NORMAL:
            logger.debug("Ignoring profile click on auth route %s", self._path)
            return
        self._modal_open = True

    def logout(self) -> None:
        self._session.logout()
        self._modal_open = False

    def modal_close(self) -> None:
        self._modal_open = False

    def browse_click(self) -> None:
        self.navigate(BROWSE_PATH)

    def navigate(self, path: str) -> None:
        """Ask the router to move to `path` and sync the route. modal_open is left as is."""
        self._router.navigate(path)
        self.sync_route(path)
