"""
General-purpose text sentiment used as the baseline signal of the contextual scorer.

TextBlob polarity is the default. FinBERT or RoBERTa can be switched on in
the scoring settings; they need the optional ``transformers`` stack and fall
back to TextBlob when the model cannot be loaded or fails on a text.
"""
import logging
from typing import Optional, Dict, Any

from textblob import TextBlob

from shared.config import get_settings
from shared.config.settings import ScoringSettings

logger = logging.getLogger(__name__)

FINBERT_MODEL = "ProsusAI/finbert"
ROBERTA_MODEL = "cardiffnlp/twitter-roberta-base-sentiment-latest"


class BaselineSentimentAnalyzer:
    """Scores text in [-1, 1] with a transformer model or TextBlob."""

    def __init__(self, settings: Optional[ScoringSettings] = None):
        self.settings = settings or get_settings().scoring
        self.analyzer = None
        self.model_type = "textblob"
        self._initialize_analyzer()

    def _initialize_analyzer(self) -> None:
        """Initialize the configured model, falling back to TextBlob."""
        candidates = []
        if self.settings.use_finbert:
            candidates.append(("finbert", FINBERT_MODEL))
        if self.settings.use_roberta:
            candidates.append(("roberta", ROBERTA_MODEL))

        for model_type, model_name in candidates:
            try:
                self.analyzer = self._load_pipeline(model_name)
                self.model_type = model_type
                logger.info(f"Initialized {model_type} sentiment analyzer")
                return
            except Exception as e:
                logger.warning(f"Failed to load {model_name}: {e}")

        self.analyzer = None
        self.model_type = "textblob"
        logger.debug("Using TextBlob baseline sentiment")

    @staticmethod
    def _load_pipeline(model_name: str):
        from transformers import pipeline
        import torch

        return pipeline(
            "sentiment-analysis",
            model=model_name,
            tokenizer=model_name,
            device=0 if torch.cuda.is_available() else -1
        )

    def analyze(self, text: Optional[str]) -> float:
        """
        Analyze sentiment of text.

        Args:
            text: Text to analyze

        Returns:
            Sentiment score between -1 (negative) and 1 (positive);
            0.0 for empty text
        """
        if not isinstance(text, str) or not text.strip():
            return 0.0

        if self.analyzer is None:
            return self._analyze_with_textblob(text)

        try:
            result = self.analyzer(text[:self.settings.max_text_length])[0]
            if self.model_type == "finbert":
                return self._process_finbert_result(result)
            return self._process_roberta_result(result)
        except Exception as e:
            logger.error(f"Error in transformer sentiment analysis: {e}")
            return self._analyze_with_textblob(text)

    def __call__(self, text: Optional[str]) -> float:
        return self.analyze(text)

    @staticmethod
    def _analyze_with_textblob(text: str) -> float:
        return float(TextBlob(text).sentiment.polarity)

    @staticmethod
    def _process_finbert_result(result: Dict[str, Any]) -> float:
        label = result['label'].lower()
        if label == 'positive':
            return float(result['score'])
        elif label == 'negative':
            return -float(result['score'])
        return 0.0

    @staticmethod
    def _process_roberta_result(result: Dict[str, Any]) -> float:
        label = result['label'].lower()
        if label in ('positive', 'label_2'):
            return float(result['score'])
        elif label in ('negative', 'label_0'):
            return -float(result['score'])
        return 0.0
