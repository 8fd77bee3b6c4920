from signalfolio.model_impl.lexicon_sentiment import LexiconSentimentModel, analyze_text, score_text
from signalfolio.model_impl.stub_sources import StubQuoteSource

def test_score_text_sums_weights():
    assert score_text("Strong growth and excellent profit.") == 9

def test_negation_flips_next_word():
    assert score_text("not good") == -3
    assert score_text("no losses this year") == 3

def test_analyze_text_normalizes_and_labels():
    out = analyze_text("Strong growth and excellent profit.")
    assert out["score"] == 4.5
    assert out["emotion"] == "positive"
    assert 0 < out["confidence"] < 0.1

def test_score_is_clamped():
    out = analyze_text("fraud " * 10)
    assert out["score"] == -5.0
    assert out["emotion"] == "negative"

def test_confidence_grows_with_text_length():
    assert analyze_text("x" * 2000)["confidence"] == 1.0
    assert analyze_text("x" * 500)["confidence"] == 0.5

def test_model_uses_generic_text_without_description():
    out = LexiconSentimentModel(StubQuoteSource()).analyze("^NSEI")
    assert out["score"] == 0.0
    assert out["emotion"] == "neutral"
    assert out["confidence"] > 0

def test_model_scores_description():
    quotes = StubQuoteSource(description="A leading, innovative and profitable company.")
    out = LexiconSentimentModel(quotes).analyze("ACME")
    assert out["score"] == 3.0
    assert out["emotion"] == "positive"
