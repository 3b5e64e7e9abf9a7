"""Domain records and pure logic of the speaker suggestion frame."""
