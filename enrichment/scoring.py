"""
LEADSCOUT — Lead Scoring Engine
Scores extracted leads for sales-readiness with a fixed additive formula.
"""

from typing import List


UNKNOWN_INDUSTRY = "Unknown"


class LeadScorer:
    """
    Deterministic 0-100 score for a LeadRecord.

    Scoring dimensions:
    - Contactability (email, phone, decision maker)       max 40
    - Website quality, weaker sites score higher          max 30
    - Social presence                                     max 15
    - Business profile (industry, location, name)         max 15

    The weights are a fixed contract, not configuration.
    """

    CONTACT_WEIGHTS = {"email": 20, "phone": 15, "decision_maker_name": 5}
    SOCIAL_WEIGHT = 5
    PROFILE_WEIGHT = 5

    def __init__(self):
        self._scores: List[int] = []

    def score(self, record) -> int:
        """Score a single lead. Pure function of the record's fields."""
        total = 0

        for attr, weight in self.CONTACT_WEIGHTS.items():
            if getattr(record, attr, None):
                total += weight

        total += self._score_quality(record.website_quality_score)
        total += self._score_social(record)
        total += self._score_profile(record)

        return max(0, min(100, total))

    @staticmethod
    def _score_quality(quality_score) -> int:
        """Poor websites are the best branding prospects."""
        if quality_score is None:
            return 0
        if quality_score < 40:
            return 30
        if quality_score < 70:
            return 20
        return 10

    def _score_social(self, record) -> int:
        total = 0
        if record.linkedin:
            total += self.SOCIAL_WEIGHT
        if record.facebook:
            total += self.SOCIAL_WEIGHT
        if record.twitter or record.instagram:
            total += self.SOCIAL_WEIGHT
        return total

    def _score_profile(self, record) -> int:
        total = 0
        if record.industry and record.industry != UNKNOWN_INDUSTRY:
            total += self.PROFILE_WEIGHT
        if record.location:
            total += self.PROFILE_WEIGHT
        if record.company_name:
            total += self.PROFILE_WEIGHT
        return total

    def score_batch(self, records: list) -> list:
        """Score a batch of leads in-place, highest score first."""
        for record in records:
            record.lead_score = self.score(record)
            self._scores.append(record.lead_score)
        return sorted(records, key=lambda r: r.lead_score, reverse=True)

    @property
    def stats(self) -> dict:
        if not self._scores:
            return {"total_scored": 0}
        return {
            "total_scored": len(self._scores),
            "avg_score": round(sum(self._scores) / len(self._scores), 1),
            "max_score": max(self._scores),
            "min_score": min(self._scores),
        }
