from .csv_set import CsvStudySet


class HiraganaStudySet(CsvStudySet):
    """
    Hiragana drill set.

    hiragana.csv rows are ``romaji,kana``: column 1 is shown, column 0 is
    the expected answer.
    """

    set_name = "hiragana"
    asset_name = "hiragana.csv"
    front_column = 1
    back_column = 0
