"""Deterministic job/candidate match scoring.

score = 100 * (0.55 * required_coverage
               + 0.20 * preferred_coverage
               + 0.25 * experience_score)

Weights, level anchors and leniency limits come from ScoringConfig so
callers can override them per tenant or per test. Nothing here raises:
out-of-range inputs are clamped.
"""

import math

from models.schemas.matching import (
    CandidateMatchProfile,
    JobMatchProfile,
    MatchBreakdown,
    ScoringConfig,
)

DEFAULT_SCORING_CONFIG = ScoringConfig()


def normalize_skills(skills: list[str] | None) -> list[str]:
    """Lower-case and trim; blank entries dropped. No stemming or synonyms."""
    return [s.strip().lower() for s in (skills or []) if s and s.strip()]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def target_years_for(job: JobMatchProfile, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> float:
    if job.experience_level is None:
        return config.default_target_years
    return config.experience_targets.get(job.experience_level, config.default_target_years)


def experience_score(
    candidate_years: float,
    target_years: float,
    leniency: float,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    """0-1 experience fit.

    At or above target: min(ratio, cap) / cap, so meeting the target is 0.5.
    Below target: the target shrinks by a leniency-driven tolerance.
    """
    if target_years <= 0:
        return 1.0
    candidate_years = max(candidate_years, 0.0)
    ratio = candidate_years / target_years
    if ratio >= 1:
        return min(ratio, config.over_target_cap) / config.over_target_cap
    leniency = _clamp(leniency, 0.0, config.max_leniency)
    tolerance = 1 - leniency * config.leniency_tolerance_factor
    adjusted = candidate_years / (target_years * tolerance)
    return _clamp(adjusted, 0.0, 1.0)


def explain_match(
    job: JobMatchProfile,
    candidate: CandidateMatchProfile,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> MatchBreakdown:
    """Score a candidate against a job and keep every intermediate."""
    required = normalize_skills(job.required_skills)
    preferred = normalize_skills(job.preferred_skills)
    candidate_skills = set(normalize_skills(candidate.skills))

    matched_required = [s for s in required if s in candidate_skills]
    matched_preferred = [s for s in preferred if s in candidate_skills]

    # No requirements cannot penalize; no nice-to-haves cannot be a free bonus
    required_coverage = len(matched_required) / len(required) if required else 1.0
    preferred_coverage = len(matched_preferred) / len(preferred) if preferred else 0.0

    target = target_years_for(job, config)
    years = target if candidate.years_of_experience is None else candidate.years_of_experience
    exp_score = experience_score(years, target, job.leniency, config)

    weights = config.weights
    total = (
        required_coverage * weights.required
        + preferred_coverage * weights.preferred
        + exp_score * weights.experience
    )
    score = round_half_up(_clamp(total * 100, 0, 100))

    return MatchBreakdown(
        required_coverage=required_coverage,
        preferred_coverage=preferred_coverage,
        experience_score=exp_score,
        target_years=target,
        candidate_years=years,
        matched_required=matched_required,
        missing_required=[s for s in required if s not in candidate_skills],
        matched_preferred=matched_preferred,
        score=score,
    )


def calculate_match_score(
    job: JobMatchProfile,
    candidate: CandidateMatchProfile,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> int:
    """0-100 integer match score."""
    return explain_match(job, candidate, config).score
