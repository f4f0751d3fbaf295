# SQLAlchemy models and session helpers
from .database import create_db_engine, get_engine, init_db, make_session_factory, session_scope
from .models import Base, QuestionBank, QuizHistory

__all__ = [
    "Base",
    "QuestionBank",
    "QuizHistory",
    "create_db_engine",
    "get_engine",
    "init_db",
    "make_session_factory",
    "session_scope",
]
