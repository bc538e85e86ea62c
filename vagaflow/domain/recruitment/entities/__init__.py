from .application import Application
from .job import Job

__all__ = ["Application", "Job"]
