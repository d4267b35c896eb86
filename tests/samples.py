"""Sample exports shared by the unit tests."""

from __future__ import annotations

# Index:                                                   row
MAPPING_CSV = "\n".join([
    "P2.マッピング,,",                                   # 0
    "項目,freee,現行給与",                               # 1
    "基本情報,従業員番号,社員番号",                      # 2
    "固定残業代,固定残業手当,固定残業代",                # 3
    "固定残業超過,固定残業超過手当,超過残業",            # 4
    "割増賃金,時間外労働手当,残業手当",                  # 5
    ",深夜労働手当,深夜手当",                            # 6
    ",,",                                                # 7
    ',"休日労働手当, 法定",休日手当,備考',               # 8
    "欠勤控除,欠勤控除額,欠勤控除",                      # 9
    ",遅刻早退控除,遅刻控除",                            # 10
])

SALARY_CSV = "\n".join([
    "1→従業員コード,氏名,部門,残業手当,深夜手当,休日手当,固定残業代",
    '2→E001,山田 太郎,営業,"12,000",3000,0,40000',
    "3→E002,佐藤 花子,開発,8000,,1500,40000",
    "",
    "4→E003,鈴木 一郎,営業,5000,1000",
]) + "\n"
