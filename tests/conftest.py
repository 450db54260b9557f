from __future__ import annotations

import graphql
import pytest

import mockql

type_defs = """
scalar MissingMockType
scalar DateTime

interface Flying {
  id: String!
  returnInt: Int
}

type Bird implements Flying {
  id: String!
  returnInt: Int
  returnString: String
  returnStringArgument(s: String): String
}

type Bee implements Flying {
  id: String!
  returnInt: Int
  returnEnum: SomeEnum
}

union BirdsAndBees = Bird | Bee

enum SomeEnum {
  A
  B
  C
}

type RootQuery {
  returnInt: Int
  returnFloat: Float
  returnString: String
  returnBoolean: Boolean
  returnID: ID
  returnDateTime: DateTime
  returnEnum: SomeEnum
  returnBirdsAndBees: [BirdsAndBees]
  returnFlying: [Flying]
  returnMockError: MissingMockType
  returnNonNullString: String!
  returnObject: Bird
  returnListOfInt: [Int]
  returnListOfListOfInt: [[Int!]!]!
  returnListOfListOfObject: [[Bird!]]!
  returnStringArgument(s: String): String
}

type RootMutation {
  returnStringArgument(s: String): String
}

schema {
  query: RootQuery
  mutation: RootMutation
}
"""


@pytest.fixture
def schema() -> graphql.GraphQLSchema:
    return mockql.build_schema_from_type_definitions(type_defs)
