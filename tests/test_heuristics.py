"""
Test Heuristic Evaluator Module

This module tests the rule-based scorer: length, structure, example and
STAR bonuses, time efficiency, the short-answer cap and the category
specific feedback.

Dependencies:
- pytest: For testing framework
- evaluation_engine.heuristics: The module being tested
"""

import random

import pytest

from evaluation_engine.heuristics import (
    category_feedback,
    criteria_scores,
    evaluate_heuristically,
    score_answer,
)
from question_bank import Answer, Question


class FixedRandom:
    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


def make_question(category="technical", time_limit=5, criteria=None):
    return Question(
        id=f"{category}_test",
        category=category,
        title="Test question",
        description="",
        difficulty="medium",
        time_limit=time_limit,
        evaluation_criteria=criteria if criteria is not None else ["Technical accuracy", "Clarity"],
    )


STAR_TEXT = "The situation was hard and my task was to fix the action plan for a good result"


class TestScoreAnswer:
    """Test score_answer for every scoring rule."""

    def test_blank_answer_scores_zero(self):
        """Blank answers score zero."""
        assert score_answer(make_question(), Answer(text="   ")) == 0

    @pytest.mark.parametrize("text", ["yes", "I like it", "one two three four"])
    def test_short_answers_never_exceed_25(self, text):
        """Answers under five words are capped at 25."""
        for category in ("technical", "behavioral", "teamwork", "leadership", "other"):
            score = score_answer(make_question(category), Answer(text=text, time_spent=200))
            assert score <= 25

    def test_short_answer_scales_with_words(self):
        """Short answers earn five points per word."""
        assert score_answer(make_question(), Answer(text="one two three four")) == 20

    def test_base_score_for_plain_answer(self):
        """A plain answer of moderate length gets the base score."""
        assert score_answer(make_question(), Answer(text=STAR_TEXT)) == 60

    def test_length_bonus(self):
        """Long answers earn a length bonus."""
        assert score_answer(make_question(), Answer(text="word " * 160)) == 75
        assert score_answer(make_question(), Answer(text="word " * 120)) == 70
        assert score_answer(make_question(), Answer(text="word " * 60)) == 65

    def test_structure_bonus(self):
        """Numbered or bulleted answers earn a structure bonus."""
        text = "My approach:\n1. Gather requirements\n2. Design the schema\n3. Ship it"
        assert score_answer(make_question(), Answer(text=text)) == 70

    def test_example_bonus(self):
        """Mentioning an example earns a bonus."""
        assert score_answer(make_question(), Answer(text="For example we cached results")) == 70

    def test_star_bonus_only_for_behavioral(self):
        """STAR keywords only count for behavioral questions."""
        assert score_answer(make_question("behavioral"), Answer(text=STAR_TEXT)) == 75
        assert score_answer(make_question("teamwork"), Answer(text=STAR_TEXT)) == 60

    def test_time_efficiency_bonus(self):
        """Using between half and 90% of the time limit earns a bonus."""
        question = make_question(time_limit=5)
        text = "I would carefully design this system today"
        assert score_answer(question, Answer(text=text, time_spent=210)) == 65
        assert score_answer(question, Answer(text=text, time_spent=285)) == 60
        assert score_answer(question, Answer(text=text, time_spent=60)) == 60

    def test_zero_time_limit_is_ignored(self):
        """A missing time limit never raises."""
        question = make_question(time_limit=0)
        assert score_answer(question, Answer(text=STAR_TEXT, time_spent=100)) == 60

    def test_score_is_clamped_to_100(self):
        """Stacked bonuses never exceed 100."""
        text = "1. situation for example " + "word " * 160
        score = score_answer(make_question("behavioral"), Answer(text=text, time_spent=210))
        assert score == 100

    def test_score_is_idempotent(self):
        """Identical inputs give identical scores."""
        question = make_question("behavioral")
        answer = Answer(text=STAR_TEXT, time_spent=120)
        assert score_answer(question, answer) == score_answer(question, answer)


class TestCategoryFeedback:
    """Test the category specific strengths, improvements and suggestions."""

    def test_behavioral_without_star(self):
        """Behavioral answers without STAR are told to use it."""
        fb = category_feedback(make_question("behavioral"), Answer(text="I fixed the bug quickly"), 60)
        assert "Use the STAR method (Situation, Task, Action, Result)" in fb.improvements
        assert "Structure your behavioral answers with STAR" in fb.suggestions

    def test_behavioral_with_star(self):
        """STAR usage is recognized as a strength."""
        fb = category_feedback(make_question("behavioral"), Answer(text=STAR_TEXT), 75)
        assert "You used the STAR method to structure your answer" in fb.strengths
        assert "STAR structure" in fb.detailed_feedback

    def test_teamwork_conflict_strength(self):
        """Teamwork answers mentioning conflict get credit."""
        fb = category_feedback(
            make_question("teamwork"),
            Answer(text="Our team had a conflict about the release date"),
            65,
        )
        assert "You approach challenging situations with maturity" in fb.strengths
        assert "Include specific examples of successful collaboration" in fb.improvements

    def test_score_band_strength(self):
        """The overall score adds a band strength."""
        fb = category_feedback(make_question("leadership"), Answer(text=STAR_TEXT), 92)
        assert "Exceptional answer that shows expertise and professional maturity" in fb.strengths
        fb = category_feedback(make_question("leadership"), Answer(text=STAR_TEXT), 75)
        assert "Adequate answer that covers the main points" in fb.strengths

    def test_brief_answer_suggestions(self):
        """Answers under 50 words are asked to develop further."""
        fb = category_feedback(make_question("other"), Answer(text=STAR_TEXT), 60)
        assert "Develop your answer with additional details" in fb.improvements
        assert "Aim for answers of at least 100-150 words" in fb.suggestions

    def test_short_answer_is_flagged(self):
        """Very short answers are called out explicitly."""
        fb = category_feedback(make_question("other"), Answer(text="no idea"), 10)
        assert "Your answer is too short to show your experience" in fb.improvements
        assert "Coherent and well-structured answer" not in fb.strengths


class TestCriteriaScores:
    """Test per-criterion scoring."""

    def test_keyword_bonus(self):
        """The first word of a criterion found in the answer adds ten points."""
        question = make_question(criteria=["Technical accuracy", "Clarity"])
        scores = criteria_scores(question, Answer(text="A technical deep dive " * 3), FixedRandom(0.5))
        assert scores == {"Technical accuracy": 85, "Clarity": 75}

    def test_scores_capped_at_100(self):
        """Jitter plus bonus never exceeds 100."""
        question = make_question(criteria=["Technical accuracy"])
        scores = criteria_scores(question, Answer(text="technical " * 10), FixedRandom(1.0))
        assert scores["Technical accuracy"] == 100

    def test_short_answer_caps_criteria(self):
        """Criterion scores of short answers never beat the overall score."""
        question = make_question(criteria=["Technical accuracy", "Clarity"])
        scores = criteria_scores(question, Answer(text="technical stuff"), FixedRandom(0.9))
        assert all(value <= 10 for value in scores.values())

    def test_no_criteria(self):
        """Questions without criteria produce an empty mapping."""
        assert criteria_scores(make_question(criteria=[]), Answer(text=STAR_TEXT)) == {}


class TestEvaluateHeuristically:
    """Test the composed heuristic evaluation."""

    def test_result_shape(self):
        """The result carries score, feedback and criteria."""
        result = evaluate_heuristically(make_question(), Answer(text=STAR_TEXT), FixedRandom(0.5))
        assert result.source == "heuristic"
        assert result.score == 60
        assert result.detailed_feedback
        assert set(result.criteria_scores) == {"Technical accuracy", "Clarity"}

    def test_repeatable_with_same_seed(self):
        """Seeded random sources make the whole result repeatable."""
        question = make_question("behavioral")
        answer = Answer(text=STAR_TEXT, time_spent=200)
        first = evaluate_heuristically(question, answer, random.Random(7))
        second = evaluate_heuristically(question, answer, random.Random(7))
        assert first == second

    def test_score_always_in_range(self):
        """Scores stay in [0, 100] for a spread of answers."""
        rng = random.Random(3)
        for words in (0, 1, 4, 5, 30, 80, 200, 500):
            text = "1. for example situation " + "word " * words if words else ""
            result = evaluate_heuristically(make_question("behavioral"), Answer(text=text, time_spent=200), rng)
            assert 0 <= result.score <= 100
            assert all(0 <= v <= 100 for v in result.criteria_scores.values())
