# trashcam/utils/scoring.py
from dataclasses import dataclass
from typing import List, Sequence

DEFAULT_TARGET_LABEL = "Correct Tras..."
DEFAULT_CONFIDENCE_THRESHOLD = 0.40


@dataclass(frozen=True)
class Prediction:
    class_name: str
    probability: float  # 0..1


@dataclass(frozen=True)
class Verdict:
    passed: bool
    label: str
    confidence: float
    message: str


def format_confidence(probability: float) -> str:
    return f"{probability * 100:.2f}%"


def format_predictions(predictions: Sequence[Prediction]) -> List[str]:
    return [f"{p.class_name}: {format_confidence(p.probability)}" for p in predictions]


def top_prediction(predictions: Sequence[Prediction]) -> Prediction:
    """First prediction with the highest probability."""
    if not predictions:
        raise ValueError("predictions must not be empty")
    best = predictions[0]
    for p in predictions[1:]:
        if p.probability > best.probability:
            best = p
    return best


def evaluate_predictions(predictions: Sequence[Prediction],
                         target_label: str = DEFAULT_TARGET_LABEL,
                         threshold: float = DEFAULT_CONFIDENCE_THRESHOLD) -> Verdict:
    best = top_prediction(predictions)
    detected = f"Detected: {best.class_name} ({format_confidence(best.probability)})"
    if best.class_name == target_label and best.probability >= threshold:
        return Verdict(True, best.class_name, best.probability, detected)
    return Verdict(False, best.class_name, best.probability,
                   f"Take another photo and try again. {detected}")
