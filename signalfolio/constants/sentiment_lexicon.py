# PURPOSE: Word weights (-5..+5) for the lexicon sentiment scorer.
# CONTEXT: AFINN-style valences, restricted to vocabulary common in company
#          descriptions and market commentary.

LEXICON = {
    # positive
    "advantage": 2, "award": 3, "awarded": 3, "beat": 2, "beats": 2,
    "benefit": 2, "benefits": 2, "best": 3, "boost": 1, "breakthrough": 3,
    "confident": 2, "efficient": 2, "excellent": 3, "expand": 1, "expanding": 1,
    "expansion": 1, "gain": 2, "gains": 2, "good": 3, "great": 3,
    "grow": 1, "growing": 1, "growth": 2, "improve": 2, "improved": 2,
    "improving": 2, "innovative": 2, "innovation": 2, "leader": 2, "leading": 2,
    "optimistic": 2, "outperform": 2, "positive": 2, "profit": 2, "profitable": 2,
    "rally": 2, "record": 1, "recover": 2, "recovery": 2, "reliable": 2,
    "resilient": 2, "robust": 2, "secure": 2, "stable": 2, "strong": 2,
    "stronger": 2, "success": 2, "successful": 3, "support": 2, "surge": 2,
    "trust": 1, "trusted": 2, "upgrade": 1, "win": 4, "winning": 4,
    # negative
    "bankrupt": -3, "bankruptcy": -3, "collapse": -2, "concern": -2, "concerns": -2,
    "crash": -2, "crisis": -3, "debt": -2, "decline": -1, "declining": -1,
    "default": -2, "deficit": -2, "downgrade": -2, "downturn": -2, "fail": -2,
    "failed": -2, "failure": -2, "fear": -2, "fraud": -4, "lawsuit": -2,
    "lose": -3, "loss": -3, "losses": -3, "miss": -2, "negative": -2,
    "penalty": -2, "poor": -2, "pressure": -1, "probe": -1, "recall": -2,
    "recession": -2, "risk": -2, "risks": -2, "risky": -2, "selloff": -2,
    "shortage": -2, "shortfall": -2, "slowdown": -2, "slump": -2, "struggle": -2,
    "uncertain": -1, "uncertainty": -1, "volatile": -2, "volatility": -1, "weak": -2,
    "weakness": -2, "worse": -3, "worst": -3,
}

NEGATIONS = frozenset({"not", "no", "never", "without", "dont", "don't", "isn't", "aren't"})
