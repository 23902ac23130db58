"""
Tests for the skill, experience and composite scorers.
"""

import pytest

from talentmatch.scoring import (
    EXPERIENCE_WEIGHT,
    SKILL_WEIGHT,
    composite_score,
    experience_score,
    skill_overlap_score,
)


class TestSkillOverlapScore:
    """Test skill set coverage scoring."""

    def test_empty_requirements_score_zero(self):
        """No stated requirements is zero signal, not a full match."""
        assert skill_overlap_score([], ["Go", "SQL"]) == 0.0
        assert skill_overlap_score([], []) == 0.0

    def test_identical_sets_score_full(self):
        skills = ["Go", "SQL", "Docker"]
        assert skill_overlap_score(skills, skills) == 100.0

    def test_partial_overlap(self):
        score = skill_overlap_score(["Go", "SQL", "Docker"], ["Go", "SQL"])
        assert score == pytest.approx(66.6667, abs=1e-3)

    def test_no_overlap(self):
        assert skill_overlap_score(["Go"], ["Rust"]) == 0.0

    def test_case_sensitive(self):
        """Tags are compared exactly."""
        assert skill_overlap_score(["Python"], ["python"]) == 0.0

    def test_duplicates_count_once(self):
        """Duplicate tags on either side have no extra effect."""
        assert skill_overlap_score(["Go", "Go", "SQL"], ["Go"]) == 50.0
        assert skill_overlap_score(["Go", "SQL"], ["Go", "Go", "Go"]) == 50.0

    def test_extra_candidate_skills_do_not_exceed_full(self):
        assert skill_overlap_score(["Go"], ["Go", "SQL", "Docker"]) == 100.0

    def test_score_bounds(self):
        cases = [
            ([], []),
            (["a"], []),
            (["a", "b"], ["b", "c"]),
            (["a", "a", "b"], ["a", "b", "c", "d"]),
        ]
        for required, candidate in cases:
            assert 0.0 <= skill_overlap_score(required, candidate) <= 100.0


class TestExperienceScore:
    """Test experience scoring against a required baseline."""

    def test_meets_requirement(self):
        assert experience_score(3, 3) == 100.0

    def test_exceeds_requirement_saturates(self):
        assert experience_score(20, 3) == 100.0

    def test_below_requirement_is_proportional(self):
        assert experience_score(1, 3) == pytest.approx(33.333, abs=1e-3)
        assert experience_score(0, 3) == 0.0

    def test_zero_requirement(self):
        """A zero requirement is met by any non-negative experience."""
        assert experience_score(0, 0) == 100.0

    def test_negative_actual_treated_as_zero(self):
        assert experience_score(-2, 3) == 0.0

    def test_monotonic_in_actual(self):
        for required in (0, 1, 3, 10):
            scores = [experience_score(actual, required) for actual in range(15)]
            assert scores == sorted(scores)
            assert all(0.0 <= s <= 100.0 for s in scores)


class TestCompositeScore:
    """Test fixed-weight combination."""

    def test_weights(self):
        assert SKILL_WEIGHT == 0.7
        assert EXPERIENCE_WEIGHT == 0.3

    def test_exact_formula(self):
        pairs = [(0.0, 0.0), (100.0, 100.0), (66.66666666666667, 100.0), (100.0, 33.333333333333336), (12.5, 87.5)]
        for skill, experience in pairs:
            assert composite_score(skill, experience) == skill * 0.7 + experience * 0.3

    def test_bounds(self):
        assert composite_score(0.0, 0.0) == 0.0
        assert composite_score(100.0, 100.0) == pytest.approx(100.0)

    def test_scenario_values(self):
        """Worker with 2/3 skills and 4 years vs worker with 3/3 skills and 1 year."""
        a = composite_score(skill_overlap_score(["Go", "SQL", "Docker"], ["Go", "SQL"]), experience_score(4, 3))
        b = composite_score(skill_overlap_score(["Go", "SQL", "Docker"], ["Go", "SQL", "Docker"]), experience_score(1, 3))
        assert a == pytest.approx(76.667, abs=1e-3)
        assert b == pytest.approx(80.0, abs=1e-9)
