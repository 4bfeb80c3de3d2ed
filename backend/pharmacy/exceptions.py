"""
统一异常体系。

所有业务异常继承 BaseAppException，包含：
- type:        错误类型标识（not_found / duplicate_key / invalid_argument / ...）
- code:        业务错误码（DOCTOR_NOT_FOUND / DOCTOR_LAST_PATIENT / ...）
- message:     人类可读的描述
- detail:      附加信息，至少包含实体类型和主键（dict / None）
- http_status: 对外暴露时建议使用的状态码

Service 层只需 raise；transaction.atomic 负责整体回滚，调用方按 type / code 处理。
"""


class BaseAppException(Exception):
    """所有业务异常的基类。"""

    type = 'error'
    code = 'UNKNOWN_ERROR'
    http_status = 500

    def __init__(self, message, code=None, detail=None, http_status=None):
        self.message = message
        if code is not None:
            self.code = code
        if http_status is not None:
            self.http_status = http_status
        self.detail = detail
        super().__init__(message)

    def to_dict(self):
        body = {
            'type': self.type,
            'code': self.code,
            'message': self.message,
        }
        if self.detail is not None:
            body['detail'] = self.detail
        return body


class NotFoundError(BaseAppException):
    """被引用的父实体不存在（Doctor / Patient / Pharmacy / ...）。"""

    type = 'not_found'
    code = 'NOT_FOUND'
    http_status = 404


class DuplicateKeyError(BaseAppException):
    """插入或改名会违反唯一约束。"""

    type = 'duplicate_key'
    code = 'DUPLICATE_KEY'
    http_status = 409


class InvalidArgumentError(BaseAppException):
    """
    值约束不满足（price<=0、stock<0、quantity<=0、age<=0、endDate<=startDate ...）。

    同一次调用里的所有字段错误会合并成一个异常，detail = {'errors': [...]}。
    """

    type = 'invalid_argument'
    code = 'INVALID_ARGUMENT'
    http_status = 400


class DependencyExistsError(BaseAppException):
    """删除被依赖记录阻止（医生有病人 / 病人有处方 / 药品已开处方）。"""

    type = 'dependency_exists'
    code = 'DEPENDENCY_EXISTS'
    http_status = 409


class IntegrityViolationError(BaseAppException):
    """删除会让实体图进入非法状态（医生的最后一个病人）。"""

    type = 'integrity_violation'
    code = 'INTEGRITY_VIOLATION'
    http_status = 409
