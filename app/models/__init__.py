from app.models.tournament import TournamentRecord

__all__ = ["TournamentRecord"]
