from abc import ABC, abstractmethod
from typing import List

from ..models import ContractTag

class TagSource(ABC):
    name: str

    @abstractmethod
    async def return_tags(self, network_id: str, credential: str) -> List[ContractTag]:
        ...
