from debug_tools import DEBUG
from linking import PAGE_SUFFIX, anchor, linked_terms, rewrite

INDEX_FILENAME = "index.html"

CSS = """<style>
body {
    background-color: #f0f0f0;
    font-family: Arial, sans-serif;
    padding: 20px;
}
h1 {
    color: #333;
    text-align: center;
    font-size: 2.5em;
    margin-bottom: 20px;
}
div {
    border: 2px solid #007BFF;
    border-radius: 10px;
    padding: 20px;
    background-color: #fff;
    max-width: 800px;
    margin: 20px auto;
    box-shadow: 0 4px 8px rgba(0, 0, 0, 0.1);
}
a {
    text-decoration: none;
    color: #007BFF;
    font-weight: bold;
}
a:hover {
    text-decoration: underline;
}
ul {
    list-style-type: none;
    padding: 0;
}
li {
    margin-bottom: 10px;
}
.button {
    display: inline-block;
    padding: 10px 20px;
    font-size: 1em;
    color: #fff;
    background-color: #007BFF;
    border: none;
    border-radius: 5px;
    text-align: center;
    text-decoration: none;
    transition: background-color 0.3s;
}
.button:hover {
    background-color: #0056b3;
}
</style>"""


def page_filename(term):
    return term + PAGE_SUFFIX


def render_index(store, directory):
    """
    Write index.html: one list entry per term, sorted by codepoint.
    Returns the path of the written file.
    """
    with directory.sink(INDEX_FILENAME) as out:
        out.writeline("<html>")
        out.writeline("<head>")
        out.writeline("<title>Glossary</title>")
        out.writeline(CSS)
        out.writeline("</head>")
        out.writeline("<body>")
        out.writeline("<h1><b>Glossary Index</b></h1>")
        out.writeline("<div>")
        out.writeline("<ul>")
        for term in store.sorted_terms():
            out.writeline(f"<li>{anchor(term, term)}</li>")
        out.writeline("</ul>")
        out.writeline("</div>")
        out.writeline("</body>")
        out.writeline("</html>")
        return out.path


def render_term(term, definition, store, directory):
    """
    Write the page for one term: title, return link, heading and the
    definition with other glossary terms turned into links.
    Returns the path of the written file.
    """
    body = rewrite(definition, store)

    with directory.sink(page_filename(term)) as out:
        out.writeline("<html>")
        out.writeline("<head>")
        out.writeline(f"<title>{term}</title>")
        out.writeline(CSS)
        out.writeline("</head>")
        out.writeline("<body>")
        out.writeline("<div>")
        out.writeline(f'<a href="{INDEX_FILENAME}" class="button">Return to Index</a>')
        out.writeline(f'<h1 style="color: red; font-weight: bold; font-style: italic;">{term}</h1>')
        out.writeline("</div>")
        out.writeline('<div style="margin-top: 20px;">')
        out.writeline(f"<p>{body}</p>")
        out.writeline("</div>")
        out.writeline("</body>")
        out.writeline("</html>")
        return out.path


def render_glossary(store, directory, progress=print):
    """
    Create the output folder, then write the index and every term page.
    Returns the list of written file paths.
    """
    directory.create()
    written = []

    DEBUG.add_flow("index_rendering_started")
    written.append(render_index(store, directory))
    progress(f"Generating {INDEX_FILENAME}...done.")

    progress("Generating glossary files...")
    DEBUG.add_flow("term_rendering_started")
    link_count = 0

    for term, definition in store.items():
        written.append(render_term(term, definition, store, directory))
        progress(f"Generating {page_filename(term)}...done.")

        if DEBUG.enabled:
            links = linked_terms(definition, store)
            link_count += len(links)
            for target in links:
                DEBUG.add_link(term, target)

    DEBUG.add_flow("term_rendering_completed")
    DEBUG.set_count("pages", len(written))
    DEBUG.set_count("links", link_count)

    progress("All files written.")
    return written
