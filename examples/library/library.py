from __future__ import annotations

import json
from typing import Any

from graphql import GraphQLResolveInfo

import mockql

type_defs = """
scalar DateTime

enum Genre {
  FICTION
  HISTORY
  SCIENCE
}

interface Item {
  id: ID!
  title: String!
}

type Book implements Item {
  id: ID!
  title: String!
  genre: Genre
  authors: [Author!]!
}

type Magazine implements Item {
  id: ID!
  title: String!
  issue: Int
}

type Author {
  name: String!
  born: DateTime
}

type Query {
  items: [Item!]!
  book(id: ID!): Book
}
"""

schema = mockql.make_executable_schema(type_defs)
mockql.add_decorators(
    schema.get_type("Book").fields["title"],  # type: ignore[union-attr]
    mockql.Description("The title as printed on the cover."),
)
mockql.apply_decorators(schema)


def resolve_book(parent: Any, info: GraphQLResolveInfo, **kwargs: Any) -> Any:
    return {
        "id": kwargs["id"],
        "authors": lambda *args, **kwargs: mockql.MockList((1, 3)),
    }


server = mockql.mock_server(
    schema,
    {
        "Author": lambda *args, **kwargs: {"name": "Ursula K. Le Guin"},
        "Query": lambda: {
            "items": lambda *args, **kwargs: mockql.MockList((2, 4)),
            "book": resolve_book,
        },
    },
)


if __name__ == "__main__":
    result = server.query(
        """
        query ($id: ID!) {
          items { __typename title }
          book(id: $id) { id title genre authors { name born } }
        }
        """,
        {"id": "42"},
    )
    print(json.dumps(result.formatted, indent=2))
