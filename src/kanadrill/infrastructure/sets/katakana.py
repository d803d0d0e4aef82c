from .csv_set import CsvStudySet


class KatakanaStudySet(CsvStudySet):
    """
    Katakana drill set.

    katakana.csv rows are ``kana,romaji`` and keep file order:
    column 0 is shown, column 1 is the expected answer.
    """

    set_name = "katakana"
    asset_name = "katakana.csv"
    front_column = 0
    back_column = 1
