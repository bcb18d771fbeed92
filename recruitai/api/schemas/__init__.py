"""
API Schemas - DTOs for the REST API.

- job_schemas: job posting requests/responses
- resume_schemas: resume ingestion and listing
- matching_schemas: match runs, reviews and matching configuration
- interview_schemas: recruiter interview management and the candidate portal
- analytics_schemas: recruiter dashboard figures
"""
