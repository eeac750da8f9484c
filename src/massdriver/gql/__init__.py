"""GraphQL access to the Massdriver API."""

from massdriver.gql.client import GRAPHQL_PATH, GraphQLClient

__all__ = ["GRAPHQL_PATH", "GraphQLClient"]
