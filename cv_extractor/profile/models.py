"""Candidate profile data model."""

from dataclasses import dataclass
from enum import Enum


class Seniority(str, Enum):
    """Coarse experience level inferred from keywords.

    Values are the labels stored by the recruitment backend.
    """

    INTERN = "Estagiario"
    JUNIOR = "Junior"
    PLENO = "Pleno"
    SENIOR = "Senior"


@dataclass(frozen=True)
class CandidateProfile:
    """Structured fields inferred from a résumé's text.

    Unknown fields are empty strings, never None.
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    seniority: Seniority = Seniority.JUNIOR
    desired_role: str = ""
    linkedin: str = ""
    summary: str = ""

    @property
    def found_fields(self) -> list[str]:
        """Names of the optional fields that were inferred."""
        candidates = ("name", "email", "phone", "desired_role", "linkedin")
        return [f for f in candidates if getattr(self, f)]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "seniority": self.seniority.value,
            "desired_role": self.desired_role,
            "linkedin": self.linkedin,
            "summary": self.summary,
        }

    def to_api_dict(self) -> dict:
        """Payload in the shape the backend's parse-CV endpoint returns."""
        return {
            "nome": self.name,
            "email": self.email,
            "telefone": self.phone,
            "senioridade": self.seniority.value,
            "cargo_desejado": self.desired_role,
            "linkedin": self.linkedin,
            "historico": self.summary,
        }
