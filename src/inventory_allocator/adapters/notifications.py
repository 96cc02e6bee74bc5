import abc
import logging
from typing import List, Tuple


logger = logging.getLogger(__name__)


class AbstractNotifications(abc.ABC):
    stock_admin: str

    @abc.abstractmethod
    async def send(self, destination: str, message: str):
        raise NotImplementedError


class LoggingNotifications(AbstractNotifications):
    """ 알림을 로그로 남긴다. 메일 서버를 붙이기 전까지는 이걸로 충분하다. """

    def __init__(
            self,
            stock_admin: str = "stock_admin@example.com",
    ):
        self.stock_admin = stock_admin
        self.sent = []  # type: List[Tuple[str, str]]

    async def send(self, destination: str, message: str):
        logger.warning(f'[{destination}] {message}')
        self.sent.append((destination, message))
