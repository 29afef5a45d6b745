"""
MedInfer — Remote prediction module

Client for a prediction service exposing POST /predict, GET /health and
GET /symptoms-info (the same API medinfer.api serves).
"""

from .client import PredictionClient


__all__ = ["PredictionClient"]
