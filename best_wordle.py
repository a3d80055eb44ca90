"""
best_wordle.py

Unified CLI for finding the best Wordle opening words.

A guess scores 3 points for every letter in the right position and 1 point
for every letter present elsewhere, summed over every possible answer.

Modes:
-words 1 (default): best first words
-words 2: best first words, each with its best second words

Optional:
-answers FILE / -guesses FILE: word lists to use (bare names are looked up
  in data/).
-menu: choose the mode and file names from an interactive text menu.
-top N: also list the N best first words, ties or not.
-debug: show every score and each discounted answer list.
-workers N: scoring threads (default: all cores).
"""

import argparse

from tqdm import tqdm

from wordscore.scoring import rank_scored, score_words, set_workers
from wordscore.search import rank_first_and_second_words, rank_first_words
from wordscore.words import (
    ANSWERS_FILE_NAME,
    GUESSES_FILE_NAME,
    load_word_list,
    merge_candidates,
    resolve_path,
)


TOP_SINGLE = 0

MENU = """
Menu Options:
  1. Display best first words only
  2. Display best first and best second words
  3. Change answers and guesses filenames
  4. Exit"""


def load_corpora(answers_file, guesses_file):
    answers = load_word_list(resolve_path(answers_file))
    guesses = load_word_list(resolve_path(guesses_file))
    print(f"{answers_file} has {len(answers)} words")
    print(f"{guesses_file} has {len(guesses)} words")
    return answers, merge_candidates(answers, guesses)


def run_first_words(answers, candidates, top=TOP_SINGLE, trace=None):
    top_score, top_words = rank_first_words(candidates, answers, trace=trace)

    print("\nWords and scores for top first words:")
    for word in top_words:
        print(f"{word} {top_score}")

    if top > 0:
        answer_set = set(answers)
        print(f"\nTop {top} first words:")
        print("flag: [+] in answers, [-] guess-only")
        for word, score in rank_scored(score_words(candidates, answers))[:top]:
            answer_flag = "+" if word in answer_set else "-"
            print(f"{word} [{answer_flag}]: {score}")


def run_first_and_second_words(answers, candidates, trace=None):
    results = rank_first_and_second_words(
        candidates, answers, trace=trace, progress=trace is None
    )

    print("\nWords and scores for top first words and second words:")
    for result in results:
        print(f"{result.first_word} {result.first_score}")
        print("".join(f"   {word} {result.second_score}" for word in result.second_words))


def choose_from_menu(answers_file, guesses_file):
    """
    Show the text menu until a search mode is picked.

    Returns (mode, answers_file, guesses_file), or None to exit.
    """
    print(f"Default file names are {answers_file} and {guesses_file}")
    while True:
        print(MENU)
        try:
            choice = input("Your choice: ").strip()
        except EOFError:
            return None

        if choice in ("1", "2"):
            return int(choice), answers_file, guesses_file
        if choice == "3":
            try:
                names = input("Enter new answers and guesses filenames: ").split()
            except EOFError:
                return None
            if len(names) != 2:
                print("Please enter exactly two filenames.")
                continue
            answers_file, guesses_file = names
        elif choice == "4":
            return None
        else:
            print(f"Invalid choice: {choice}")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Find the best one or two Wordle starting words."
    )
    parser.add_argument(
        "-words",
        type=int,
        choices=(1, 2),
        default=1,
        help="1: best first words, 2: best first and second words (default: 1).",
    )
    parser.add_argument(
        "-answers",
        default=ANSWERS_FILE_NAME,
        help=f"Answer word list (default: {ANSWERS_FILE_NAME}).",
    )
    parser.add_argument(
        "-guesses",
        default=GUESSES_FILE_NAME,
        help=f"Guess-only word list (default: {GUESSES_FILE_NAME}).",
    )
    parser.add_argument(
        "-menu",
        action="store_true",
        help="Pick the mode and file names from an interactive menu.",
    )
    parser.add_argument(
        "-top",
        type=int,
        default=TOP_SINGLE,
        help="Also list this many best first words in -words 1 mode.",
    )
    parser.add_argument(
        "-debug",
        action="store_true",
        help="Show all scores and the discounted answer lists.",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=None,
        help="Threads used for scoring (default: CPU count).",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    mode, answers_file, guesses_file = args.words, args.answers, args.guesses

    if args.menu:
        chosen = choose_from_menu(answers_file, guesses_file)
        if chosen is None:
            return
        mode, answers_file, guesses_file = chosen

    trace = tqdm.write if args.debug else None

    try:
        set_workers(args.workers)
        answers, candidates = load_corpora(answers_file, guesses_file)
        if mode == 1:
            run_first_words(answers, candidates, top=args.top, trace=trace)
        else:
            run_first_and_second_words(answers, candidates, trace=trace)
    except (ValueError, FileNotFoundError) as exc:
        raise SystemExit(str(exc)) from exc

    print("Done")


if __name__ == "__main__":
    main()
