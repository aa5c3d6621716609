"""ETL package: FlixPatrol top 10 extraction and TMDB id resolution."""
