"""
session_stats.py
----------------
Tracks statistics for the current play session.
Lives in the game loop, so it survives simulation restarts, and feeds
the game-over overlay (best score, kills, run time, run number).
"""


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """Container for per-process statistics. Nothing is written to disk."""

    def __init__(self):
        self.score = 0
        self.high_score = 0
        self.enemies_killed = 0
        self.run_time = 0.0
        self.runs = 1

    # ===========================================================
    # Frame Sync
    # ===========================================================

    def record(self, snapshot, kills: int, run_time: float):
        """Copy the latest simulation totals and update the high score."""
        self.score = snapshot.score
        self.enemies_killed = kills
        self.run_time = run_time
        if self.score > self.high_score:
            self.high_score = self.score

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Reset run stats for a new game. Preserves high score."""
        self.score = 0
        self.enemies_killed = 0
        self.run_time = 0.0
        self.runs += 1

    # ===========================================================
    # Presentation
    # ===========================================================

    def summary(self) -> str:
        """One-line recap of the current run for the game-over screen."""
        return f"Run {self.runs}: {self.enemies_killed} kills in {self.run_time:.1f}s"


# ===========================================================
# Singleton Access
# ===========================================================

_SESSION_STATS = None


def get_session_stats() -> SessionStats:
    """Return the process-wide SessionStats instance."""
    global _SESSION_STATS
    if _SESSION_STATS is None:
        _SESSION_STATS = SessionStats()
    return _SESSION_STATS
