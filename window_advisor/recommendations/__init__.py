"""
Recommendation engine: filters and scores catalog products against
questionnaire answers and returns a ranked shortlist with human-readable
explanations.

Modules
-------
pricing   : calculate_pricing() — window + installation cost estimate.
scorer    : ScoreComponents dataclass + compute_score() + signal predicates
            — pure functions, no I/O.
explainer : build_reasons() — ordered justifications, capped at four.
ranker    : ScoredProduct dataclass + score_catalog() + top_n() +
            build_recommendations() + recommend().
"""
