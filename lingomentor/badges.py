"""
Badge catalogue and the quiz statistics the award rules are evaluated on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Sequence

from .database import utcnow

# A quiz counts towards a streak from 60% correct answers.
STREAK_THRESHOLD = 0.6
POINTS_PER_LEVEL = 100


@dataclass
class UserStats:
    user_id: int
    level: int
    total_points: int
    quizzes_completed: int
    accuracy: int
    categories_completed: list[str]
    perfect_scores: int
    current_streak: int
    max_streak: int
    quizzes_today: int
    quizzes: Sequence[Any] = field(default_factory=list)


@dataclass(frozen=True)
class BadgeDefinition:
    id: str
    name: str
    description: str
    icon: str
    color: str
    type: str
    condition: Callable[[UserStats], bool]


def _ratio(quiz) -> float | None:
    total = quiz.total_answers or 0
    if not total:
        return None
    return (quiz.correct_answers or 0) / total


def _voice_master(stats: UserStats) -> bool:
    for quiz in stats.quizzes:
        if quiz.category == "voice-interaction":
            ratio = _ratio(quiz)
            return ratio is not None and ratio >= 0.9
    return False


def calculate_user_stats(quizzes: Sequence[Any], user_id: int, today: date | None = None) -> UserStats:
    """
    `quizzes` must be in chronological order (oldest first). Each item needs
    `points`, `correct_answers`, `total_answers`, `category` and `created_at`.
    """
    today = today or utcnow().date()

    total_points = sum(q.points or 0 for q in quizzes)
    total_correct = sum(q.correct_answers or 0 for q in quizzes)
    total_answered = sum(q.total_answers or 0 for q in quizzes)
    accuracy = int(total_correct / total_answered * 100 + 0.5) if total_answered else 0

    categories = []
    for q in quizzes:
        if q.category and q.category not in categories:
            categories.append(q.category)

    ratios = [_ratio(q) for q in quizzes]
    perfect_scores = sum(1 for r in ratios if r == 1)

    current_streak = 0
    for r in reversed(ratios):
        if r is None or r < STREAK_THRESHOLD:
            break
        current_streak += 1

    max_streak = run = 0
    for r in ratios:
        run = run + 1 if r is not None and r >= STREAK_THRESHOLD else 0
        max_streak = max(max_streak, run)

    quizzes_today = sum(1 for q in quizzes if q.created_at and q.created_at.date() == today)

    return UserStats(
        user_id=user_id,
        level=total_points // POINTS_PER_LEVEL + 1,
        total_points=total_points,
        quizzes_completed=len(quizzes),
        accuracy=accuracy,
        categories_completed=categories,
        perfect_scores=perfect_scores,
        current_streak=current_streak,
        max_streak=max_streak,
        quizzes_today=quizzes_today,
        quizzes=list(quizzes),
    )


BADGE_DEFINITIONS: list[BadgeDefinition] = [
    BadgeDefinition("first-quiz", "First Steps", "Complete your very first quiz",
                    "ri-star-line", "from-yellow-400 to-orange-500", "milestone",
                    lambda s: s.quizzes_completed >= 1),

    # Levels
    BadgeDefinition("level-5", "Rising Star", "Reach Level 5",
                    "ri-arrow-up-line", "from-blue-400 to-indigo-500", "level",
                    lambda s: s.level >= 5),
    BadgeDefinition("level-10", "Knowledge Seeker", "Reach Level 10",
                    "ri-book-open-line", "from-green-400 to-emerald-500", "level",
                    lambda s: s.level >= 10),
    BadgeDefinition("level-20", "Expert Learner", "Reach Level 20",
                    "ri-award-line", "from-purple-400 to-pink-500", "level",
                    lambda s: s.level >= 20),
    BadgeDefinition("level-50", "Master Coder", "Reach Level 50",
                    "ri-crown-line", "from-yellow-400 via-orange-500 to-red-500", "level",
                    lambda s: s.level >= 50),

    # Quiz counts
    BadgeDefinition("quiz-5", "Quiz Enthusiast", "Complete 5 quizzes",
                    "ri-questionnaire-line", "from-cyan-400 to-blue-500", "quiz",
                    lambda s: s.quizzes_completed >= 5),
    BadgeDefinition("quiz-10", "Quiz Master", "Complete 10 quizzes",
                    "ri-medal-line", "from-purple-400 to-pink-500", "quiz",
                    lambda s: s.quizzes_completed >= 10),
    BadgeDefinition("quiz-25", "Quiz Champion", "Complete 25 quizzes",
                    "ri-trophy-line", "from-yellow-400 to-orange-500", "quiz",
                    lambda s: s.quizzes_completed >= 25),
    BadgeDefinition("quiz-50", "Quiz Legend", "Complete 50 quizzes",
                    "ri-fire-line", "from-red-400 to-pink-500", "quiz",
                    lambda s: s.quizzes_completed >= 50),

    # Accuracy
    BadgeDefinition("accuracy-80", "Sharp Mind", "Achieve 80% accuracy",
                    "ri-brain-line", "from-green-400 to-emerald-500", "accuracy",
                    lambda s: s.accuracy >= 80 and s.quizzes_completed >= 3),
    BadgeDefinition("accuracy-90", "Precision Master", "Achieve 90% accuracy",
                    "ri-target-line", "from-blue-400 to-indigo-500", "accuracy",
                    lambda s: s.accuracy >= 90 and s.quizzes_completed >= 5),
    BadgeDefinition("accuracy-95", "Perfect Aim", "Achieve 95% accuracy",
                    "ri-bullseye-line", "from-purple-400 to-pink-500", "accuracy",
                    lambda s: s.accuracy >= 95 and s.quizzes_completed >= 10),

    # Categories
    BadgeDefinition("category-1", "Category Explorer", "Complete quizzes in 1 different category",
                    "ri-compass-line", "from-cyan-400 to-blue-500", "category",
                    lambda s: len(s.categories_completed) >= 1),
    BadgeDefinition("category-3", "Multi-Skill Learner", "Complete quizzes in 3 different categories",
                    "ri-layout-grid-line", "from-green-400 to-emerald-500", "category",
                    lambda s: len(s.categories_completed) >= 3),
    BadgeDefinition("category-all", "Complete Scholar", "Complete quizzes in all 6 categories",
                    "ri-global-line", "from-purple-400 to-pink-500", "category",
                    lambda s: len(s.categories_completed) >= 6),

    # Perfect scores
    BadgeDefinition("perfect-1", "Perfect Score", "Get a perfect score on any quiz",
                    "ri-check-double-line", "from-green-400 to-emerald-500", "milestone",
                    lambda s: s.perfect_scores >= 1),
    BadgeDefinition("perfect-3", "Consistent Excellence", "Get perfect scores on 3 quizzes",
                    "ri-star-double-line", "from-blue-400 to-indigo-500", "milestone",
                    lambda s: s.perfect_scores >= 3),
    BadgeDefinition("perfect-5", "Perfectionist", "Get perfect scores on 5 quizzes",
                    "ri-diamond-line", "from-purple-400 to-pink-500", "milestone",
                    lambda s: s.perfect_scores >= 5),

    # Streaks
    BadgeDefinition("streak-3", "On Fire", "Complete 3 quizzes in a row",
                    "ri-fire-line", "from-orange-400 to-red-500", "streak",
                    lambda s: s.current_streak >= 3),
    BadgeDefinition("streak-7", "Week Warrior", "Complete 7 quizzes in a row",
                    "ri-calendar-check-line", "from-purple-400 to-pink-500", "streak",
                    lambda s: s.current_streak >= 7),
    BadgeDefinition("streak-14", "Fortnight Fighter", "Complete 14 quizzes in a row",
                    "ri-time-line", "from-blue-400 to-indigo-500", "streak",
                    lambda s: s.current_streak >= 14),

    # Points
    BadgeDefinition("points-100", "Century Club", "Earn 100 total points",
                    "ri-coins-line", "from-yellow-400 to-orange-500", "milestone",
                    lambda s: s.total_points >= 100),
    BadgeDefinition("points-500", "Half Grand", "Earn 500 total points",
                    "ri-bank-card-line", "from-green-400 to-emerald-500", "milestone",
                    lambda s: s.total_points >= 500),
    BadgeDefinition("points-1000", "Grand Master", "Earn 1000 total points",
                    "ri-vip-crown-line", "from-purple-400 to-pink-500", "milestone",
                    lambda s: s.total_points >= 1000),

    # Special
    BadgeDefinition("voice-master", "Voice Master", "Complete voice interaction quiz with 90%+ accuracy",
                    "ri-mic-2-line", "from-purple-400 to-pink-500", "milestone",
                    _voice_master),
    BadgeDefinition("speed-demon", "Speed Demon", "Complete 5 quizzes in one day",
                    "ri-speed-up-line", "from-red-400 to-pink-500", "milestone",
                    lambda s: s.quizzes_today >= 5),
]
