"""The introspection query sent to GraphQL servers.

Field, argument and input field type references unwrap `ofType` three levels
deep. That covers shapes up to `[String!]!`; a deeper reference such as
`[[String!]!]!` is cut off and renders as an empty string.
"""

INTROSPECTION_QUERY = """
query {
    __schema {
        types {
            kind
            name
            description
            fields(includeDeprecated: true) {
                name
                description
                args {
                    name
                    description
                    type {
                        kind
                        name
                        ofType {
                            kind
                            name
                            ofType {
                                kind
                                name
                                ofType {
                                    kind
                                    name
                                }
                            }
                        }
                    }
                    defaultValue
                }
                type {
                    kind
                    name
                    ofType {
                        kind
                        name
                        ofType {
                            kind
                            name
                            ofType {
                                kind
                                name
                            }
                        }
                    }
                }
                isDeprecated
                deprecationReason
            }
            inputFields {
                name
                description
                type {
                    kind
                    name
                    ofType {
                        kind
                        name
                        ofType {
                            kind
                            name
                            ofType {
                                kind
                                name
                            }
                        }
                    }
                }
                defaultValue
            }
            interfaces {
                kind
                name
                ofType {
                    kind
                    name
                }
            }
            enumValues(includeDeprecated: true) {
                name
                description
                isDeprecated
                deprecationReason
            }
            possibleTypes {
                kind
                name
                ofType {
                    kind
                    name
                }
            }
        }
    }
}
"""
