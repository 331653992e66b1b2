"""SkillHub: social learning network API."""

__version__ = "1.0.0"
