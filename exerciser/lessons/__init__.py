"""Worked solutions to the course's exercises, grouped by topic."""