"""Zoo intake: names newly arriving animals and appends them to the population report."""
