"""HTTP messages: header store, body streams and the immutable request and response."""
