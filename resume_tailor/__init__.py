"""ResumeTailor AI: tailor a resume to a job description with an LLM."""
