"""
AMA – SQLAlchemy ORM models package.

Imports all model classes so the app can discover them through a single
``from ama.models import *`` import.
"""

from ama.models.ama import AMA                        # noqa: F401
from ama.models.question import Question              # noqa: F401
from ama.models.question_vote import QuestionVote     # noqa: F401
from ama.models.answer import Answer                  # noqa: F401
