from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    AUTH = "auth"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UPSTREAM_REJECTED = "upstream_rejected"


#unified relay errors
class RelayError(RuntimeError):
    kind: ErrorKind = ErrorKind.UPSTREAM_REJECTED

class SecretAccessError(RelayError):
    kind = ErrorKind.AUTH

class PredictionError(RelayError): ...

class PredictionAuthError(PredictionError):
    kind = ErrorKind.AUTH

class PredictionUnavailable(PredictionError):
    kind = ErrorKind.UPSTREAM_UNAVAILABLE

class PredictionRejected(PredictionError):
    kind = ErrorKind.UPSTREAM_REJECTED


@dataclass(frozen=True)
class PredictionRequest:
    model: str
    input: Dict[str, Any]

@dataclass(frozen=True)
class Prediction:
    id: str
    status: str #starting | processing | succeeded | failed | canceled, owned by the remote service
    model: Optional[str] = None
    version: Optional[str] = None
    created_at: Optional[str] = None
    started_at: Optional[str] = None
    completed_at: Optional[str] = None
    output: Any = None
    error: Any = None
    raw: Any = field(default=None, compare=False, repr=False) #provider-native object

class PredictionProvider(ABC):
    @abstractmethod
    def create_prediction(self, req: PredictionRequest) -> Prediction:
        raise NotImplementedError

    @abstractmethod
    def get_prediction(self, task_id: str) -> Prediction:
        raise NotImplementedError
