"""ATS resume-to-job scoring engine."""
