import cProfile
import pstats

from blcount import CountTable, enumerate_terms, unrank_with_table


def main():
    table = CountTable()
    total = table.count(0, 120)
    for k in range(1, 2001):
        unrank_with_table(0, 120, total - k + 1, table)

    for term in enumerate_terms(0, 22):
        term.size()


if __name__ == "__main__":
    with cProfile.Profile() as profile:
        main()
        print("bench done")
        results = pstats.Stats(profile)
        results.sort_stats(pstats.SortKey.TIME)
        results.dump_stats("results.profile")
