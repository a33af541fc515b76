"""Routes of the app and the role-specific navigation menu."""

from dataclasses import dataclass

from hoopcamp.database.records import Profile, Role

ROLE_BASE_ROUTES: dict[str, str] = {
    "coach": "/coach",
    "student": "/student",
}


@dataclass(frozen=True)
class Route:
    path: str
    url_path: str
    title: str
    icon: str
    role: Role | None = None
    menu_label: str | None = None


ROUTES = [
    Route("/", "", "Home", ":material/home:"),
    Route("/auth", "auth", "Sign In", ":material/login:"),
    # Coach space
    Route("/coach/dashboard", "coach-dashboard", "Coach Dashboard", ":material/dashboard:",
          role="coach", menu_label="Dashboard"),
    Route("/coach/camps", "coach-camps", "Camps", ":material/camping:",
          role="coach", menu_label="Camps"),
    Route("/coach/players", "coach-players", "Players", ":material/groups:",
          role="coach", menu_label="Players"),
    Route("/coach/players/detail", "coach-player", "Player", ":material/person:",
          role="coach"),
    Route("/coach/games", "coach-games", "Games", ":material/sports_basketball:",
          role="coach", menu_label="Games"),
    Route("/coach/games/stats", "coach-game-stats", "Game Roster & Stats", ":material/scoreboard:",
          role="coach"),
    Route("/coach/training", "coach-training", "Training", ":material/fitness_center:",
          role="coach", menu_label="Training"),
    Route("/coach/training/evaluations", "coach-evaluations", "Evaluations", ":material/rate_review:",
          role="coach"),
    Route("/coach/attendance", "coach-attendance", "Attendance", ":material/qr_code_scanner:",
          role="coach", menu_label="Attendance"),
    # Student space
    Route("/student/dashboard", "student-dashboard", "My Dashboard", ":material/dashboard:",
          role="student", menu_label="Dashboard"),
    Route("/student/camps", "student-camps", "Browse Camps", ":material/camping:",
          role="student", menu_label="Browse Camps"),
    Route("/student/profile", "student-profile", "My Profile", ":material/badge:",
          role="student", menu_label="Profile"),
]

ROUTES_BY_PATH = {route.path: route for route in ROUTES}
ROUTES_BY_URL_PATH = {route.url_path: route for route in ROUTES}


def route_for_url_path(url_path: str) -> Route:
    """Map a Streamlit page url_path back to its route (unknown -> landing)."""
    return ROUTES_BY_URL_PATH.get(url_path.strip("/"), ROUTES_BY_PATH["/"])


def base_route(profile: Profile | None) -> str | None:
    """Return the role's base route, or None when the role cannot be trusted."""
    if profile is None:
        return None
    return ROLE_BASE_ROUTES.get(profile.role)


def dashboard_path(role: str | None) -> str | None:
    """Where to land after signing in, or None for a role without a space."""
    base = ROLE_BASE_ROUTES.get(role)
    if base is None:
        return None
    return f"{base}/dashboard"


def menu_entries(profile: Profile | None) -> list[Route]:
    """Menu entries visible to ``profile``.

    A missing profile, or one with an unknown role, gets no menu at all
    instead of falling back to some default role.
    """
    base = base_route(profile)
    if base is None:
        return []
    return [
        route for route in ROUTES
        if route.menu_label and route.role == profile.role
    ]
