from abc import ABC, abstractmethod

from projectetl.extract._raw import GraphQLResponse, QueryPayload


class GraphQLClient(ABC):
    @abstractmethod
    def request(self, query: QueryPayload) -> GraphQLResponse:
        """Execute one query; raise ``BadGatewayError`` on an upstream 502."""
