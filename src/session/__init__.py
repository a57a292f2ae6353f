from src.session.loop import ReadLoop, SessionConfig, SessionSummary

__all__ = ["ReadLoop", "SessionConfig", "SessionSummary"]
