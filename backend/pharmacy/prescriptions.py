"""
处方「新建或重开」决策表。

同一 (patient, doctor) 在 add_prescription 流程里最多只有一张有效处方：

    已有处方?   新日期 vs 库中日期     动作        返回
    ---------   ------------------     -------     ---------
    否          -                      CREATE      新处方 id
    是          严格更晚               REISSUE     原处方 id（改日期 + 清空明细）
    是          相同或更早             KEEP        原处方 id（不做任何修改）

这里只做决策，不碰数据库；执行在 services.add_prescription。
"""

from enum import Enum


class PrescriptionAction(str, Enum):
    CREATE = 'create'
    REISSUE = 'reissue'
    KEEP = 'keep'


# key: (已有处方?, 新日期严格更晚?)
_DECISION_TABLE = {
    (False, False): PrescriptionAction.CREATE,
    (False, True): PrescriptionAction.CREATE,
    (True, True): PrescriptionAction.REISSUE,
    (True, False): PrescriptionAction.KEEP,
}


def decide_prescription_action(existing_date, new_date):
    """
    Args:
        existing_date: 该 (patient, doctor) 现有处方的日期；没有处方时传 None
        new_date:      本次提交的处方日期

    Returns:
        PrescriptionAction
    """
    exists = existing_date is not None
    is_later = exists and new_date > existing_date
    return _DECISION_TABLE[(exists, is_later)]
