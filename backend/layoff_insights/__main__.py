"""`python -m layoff_insights` — serve the API with settings from the environment."""

from layoff_insights.main import run

run()
