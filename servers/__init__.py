"""Process entry points: the HTTP run endpoint and the scheduled trigger."""
