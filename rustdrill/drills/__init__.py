"""Worked solutions to the exercise topics, as plain functions and classes."""