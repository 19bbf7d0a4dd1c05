# catalog/api/schema.py
"""
GraphQL SDL exported as a Python string named type_defs.
The application imports this module and expects type_defs to be available.
"""

type_defs = """
schema {
  query: Query
  mutation: Mutation
  subscription: Subscription
}

type Book {
  title: String!
  published: Int!
  author: Author
  id: ID!
  genres: [String!]!
}

type Author {
  name: String!
  id: ID!
  born: Int
  bookCount: Int!
}

type User {
  username: String!
  favouriteGenre: String!
  id: ID!
}

type Token {
  value: String!
}

type Query {
  bookCount: Int!
  authorCount: Int!
  allBooks(author: String, genre: String): [Book!]!
  allAuthors: [Author!]!
  me: User
}

type Mutation {
  addBook(
    title: String!
    author: String!
    published: Int!
    genres: [String!]!
  ): Book

  editAuthor(name: String!, setBornTo: Int!): Author

  createUser(username: String!, favouriteGenre: String!): User

  login(username: String!, password: String!): Token
}

type Subscription {
  bookAdded: Book!
}
"""
