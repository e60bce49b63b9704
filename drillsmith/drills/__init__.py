"""Worked solutions to the drill topics, one module per topic."""