"""pypyr steps for the ``score_batch`` pipeline."""
