from .candidate import Candidate
from .company import Company

__all__ = ["Candidate", "Company"]
