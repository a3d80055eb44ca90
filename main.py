"""
main.py

Prints the best first words for the default word lists.
"""

from wordscore.search import rank_first_words
from wordscore.words import load_words


answers, candidates = load_words()

print("Computing first-word scores...")
top_score, top_words = rank_first_words(candidates, answers)

print("\nTop first words:")
for word in top_words:
    print(f"{word}: {top_score}")
