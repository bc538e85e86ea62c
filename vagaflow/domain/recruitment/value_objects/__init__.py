from .job_title import JobTitle

__all__ = ["JobTitle"]
