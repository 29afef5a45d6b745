"""
MedInfer — Exceptions

Every failure the engine surfaces is one of these types. Callers get either a
complete Ranking or exactly one of them.

    MedInferError
    ├── ValidationError            (rejected before any computation)
    │   ├── EmptySelectionError
    │   ├── InvalidSymptomError
    │   └── SymptomOutOfRangeError
    ├── ModelUnavailableError
    ├── ClassifierError
    │   ├── NotReadyError
    │   ├── ClassifierStateError
    │   └── NumericalInstabilityError
    ├── LoadError
    │   ├── ShapeMismatchError
    │   ├── MissingAssetError
    │   └── LoadTimeoutError
    ├── NoMatchingDiseaseError
    └── RemotePredictionError
"""

from typing import List, Optional


class MedInferError(Exception):
    """Base class"""


# =============================================================================
# VALIDATION
# =============================================================================

class ValidationError(MedInferError):
    """Invalid caller input"""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or [message]


class EmptySelectionError(ValidationError):
    def __init__(self, message: str = "At least one symptom must be selected"):
        super().__init__(message)


class InvalidSymptomError(ValidationError):
    """Symptom id is not a string or does not follow the id convention"""


class SymptomOutOfRangeError(ValidationError):
    """symptom_<n> with n outside the index table"""


# =============================================================================
# MODEL
# =============================================================================

class ModelUnavailableError(MedInferError):
    """Model strategy requested but the classifier is not ready"""


class ClassifierError(MedInferError):
    pass


class NotReadyError(ClassifierError):
    pass


class ClassifierStateError(ClassifierError):
    """Operation not allowed in the current lifecycle state"""


class NumericalInstabilityError(ClassifierError):
    """Output distribution is not finite or does not sum to 1"""


# =============================================================================
# LOADING
# =============================================================================

class LoadError(MedInferError):
    pass


class ShapeMismatchError(LoadError):
    pass


class MissingAssetError(LoadError):

    def __init__(self, asset: str, detail: str = ""):
        message = f"Missing asset: {asset}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.asset = asset


class LoadTimeoutError(LoadError):
    pass


# =============================================================================
# OTHER
# =============================================================================

class NoMatchingDiseaseError(MedInferError):
    """Rule strategy found no disease sharing a symptom with the selection"""


class RemotePredictionError(MedInferError):

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
