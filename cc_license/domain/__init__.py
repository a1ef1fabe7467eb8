"""
Creative Commons License Domain Layer

Value objects and the License aggregate. All domain objects are
immutable and have ZERO external dependencies.
"""
