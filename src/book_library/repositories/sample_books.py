"""Sample catalogue preloaded at startup when SEED_SAMPLE_BOOKS is enabled."""

from book_library.entities import Book

SAMPLE_BOOKS: tuple[Book, ...] = (
    # Classics
    Book(101, "The Great Gatsby", "F. Scott Fitzgerald", 1925, "978-0743273565", False),
    Book(102, "To Kill a Mockingbird", "Harper Lee", 1960, "978-0061120084", True),
    Book(103, "1984", "George Orwell", 1949, "978-0451524935", False),
    # Fantasy and sci-fi
    Book(104, "The Hobbit", "J.R.R. Tolkien", 1937, "978-0618260300", False),
    Book(105, "Dune", "Frank Herbert", 1965, "978-0441172719", True),
    Book(106, "A Game of Thrones", "George R.R. Martin", 1996, "978-0553103540", False),
    Book(107, "The Fellowship of the Ring", "J.R.R. Tolkien", 1954, "978-0618346257", True),
    # Modern classics
    Book(108, "A Thousand Splendid Suns", "Khaled Hosseini", 2007, "978-1594489501", False),
    Book(109, "The Martian", "Andy Weir", 2011, "978-0804139021", True),
    Book(110, "Where the Crawdads Sing", "Delia Owens", 2018, "978-0735219090", False),
    # Mystery and thrillers
    Book(111, "Gone Girl", "Gillian Flynn", 2012, "978-0307588371", False),
    Book(112, "The Silent Patient", "Alex Michaelides", 2019, "978-1250301691", True),
    # Historical fiction
    Book(113, "The Nightingale", "Kristin Hannah", 2015, "978-0312577239", False),
    Book(114, "The Book Thief", "Markus Zusak", 2005, "978-0375842207", False),
    # Short fiction
    Book(115, "The Old Man and the Sea", "Ernest Hemingway", 1952, "978-0684801223", True),
    Book(116, "Of Mice and Men", "John Steinbeck", 1937, "978-0140177398", False),
    # Young adult
    Book(117, "The Hunger Games", "Suzanne Collins", 2008, "978-0439023528", False),
    Book(118, "The Maze Runner", "James Dashner", 2009, "978-0385737944", True),
    # Repeat author for search
    Book(119, "The Two Towers", "J.R.R. Tolkien", 1954, "978-0618346264", False),
    Book(120, "Fahrenheit 451", "Ray Bradbury", 1953, "978-1451673319", False),
)
