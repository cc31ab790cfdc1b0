def ranges_overlap(start1: int, end1: int, start2: int, end2: int) -> bool:
    """半開区間 [start1, end1) と [start2, end2) が重なるかどうか

    片方の終了時刻ともう片方の開始時刻が等しい場合は隣接であり、重複ではない。
    重複判定はすべてこの関数を経由すること。
    """
    return start1 < end2 and start2 < end1
