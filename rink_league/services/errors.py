"""服务层异常定义。

存储层的约束错误（sqlalchemy.exc.IntegrityError）不在此重新包装，
原样抛给调用方，由 API 层映射为 409。
"""


class ServiceError(Exception):
    """服务层异常基类"""


class NotFoundError(ServiceError):
    """引用的联赛 / 比赛 / 球队等不存在"""


class ValidationError(ServiceError):
    """业务状态不满足操作前提，如联赛球队不足"""
