"""
RecruitAI - multi-tenant applicant tracking with AI-assisted matching and
asynchronous candidate interviews.
"""

__version__ = "1.0.0"
