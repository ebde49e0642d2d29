"""
HTML page fixtures for testing.
"""

PARAGRAPHS = """
<p>Static site generators have quietly become the default way to publish a technical blog.
They turn a folder of Markdown files into plain HTML that any web server can host.</p>
<p>The appeal is simple: there is no database to patch, no plugin ecosystem to audit and no
runtime to keep alive. Pages are rendered once at build time and cached forever.</p>
<p>In this post we walk through the trade-offs we hit while moving our engineering blog
from a hosted CMS to a generator, including search, comments and image handling.</p>
"""

# Server-rendered article that the structural parser can handle
ARTICLE_HTML = f"""
<!DOCTYPE html>
<html>
<head>
    <title>My First Post | Example Blog</title>
    <meta property="og:title" content="My First Post (OG)">
    <meta name="author" content="Jane Doe">
</head>
<body>
    <nav><a href="/">Home</a></nav>
    <h1>My First Post</h1>
    <article>{PARAGRAPHS}</article>
    <footer>Copyright 2024</footer>
</body>
</html>
"""

# Client-rendered shell: the article only exists after scripts run
SHELL_HTML = """
<!DOCTYPE html>
<html>
<head><title>Loading...</title></head>
<body>
    <div id="root"></div>
    <main><p>Loading...</p></main>
    <script src="/static/app.js"></script>
</body>
</html>
"""

# What the browser sees once the shell above has rendered
RENDERED_HTML = f"""
<!DOCTYPE html>
<html>
<head>
    <title>Moving Our Blog to a Static Generator</title>
    <meta name="author" content="Rendered Author">
</head>
<body>
    <div class="sidebar"><a href="/tags">Tags</a> <a href="/about">About</a></div>
    <div class="post-body">
        <h1>Moving Our Blog to a Static Generator</h1>
        {PARAGRAPHS}
        {PARAGRAPHS}
    </div>
    <div class="footer">Subscribe to our newsletter</div>
</body>
</html>
"""

# Rendered page where readability is not used and a structural container holds the text
RENDERED_MAIN_HTML = f"""
<html>
<head><title>Fallback Title</title></head>
<body>
    <main>{PARAGRAPHS}</main>
</body>
</html>
"""

# Rendered page with nothing worth extracting
RENDERED_EMPTY_HTML = """
<html>
<head><title>Empty</title></head>
<body><div>Nothing to see here.</div></body>
</html>
"""
