"""
Advent of Code 2015 Day 1: Not Quite Lisp.

"(" moves Santa up one floor, ")" moves him down one.
"""

from typing import Sequence

from ...platforms import Platform, register_solution


@register_solution(Platform.ADVENT_OF_CODE, "y2015d01p1")
def final_floor(input: Sequence[str], verbose: bool) -> int:
    """Part 1: the floor Santa ends up on."""
    floor = 0
    for step, char in enumerate(input[0]):
        floor += 1 if char == "(" else -1
        if verbose:
            print(f"Step = {step}; Current floor = {floor: d}")

    if verbose:
        print(f"\nFinal floor = {floor}")
    return floor


@register_solution(Platform.ADVENT_OF_CODE, "y2015d01p2")
def first_basement_step(input: Sequence[str], verbose: bool) -> int:
    """Part 2: 1-based position of the first step into the basement (0 if never)."""
    floor = 0
    for step, char in enumerate(input[0], start=1):
        floor += 1 if char == "(" else -1
        if floor < 0:
            if verbose:
                print(f"Entered the basement at position {step}")
            return step

    if verbose:
        print("Never entered the basement")
    return 0
