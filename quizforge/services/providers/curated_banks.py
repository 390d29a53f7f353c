# Hand-written question banks for the local provider.
# Ids are assigned when a quiz is built, so entries carry none.

FRONTEND_BANK = [
    {
        "question": "What does HTML stand for?",
        "options": [
            "HyperText Markup Language",
            "High-level Text Management Language",
            "Hyperlink and Text Markup Logic",
            "Home Tool Markup Language",
        ],
        "correctIndex": 0,
        "explanation": "HTML is the HyperText Markup Language, the standard markup for structuring web pages.",
    },
    {
        "question": "Which language is primarily used to style the appearance of web pages?",
        "options": ["JavaScript", "CSS", "SQL", "HTTP"],
        "correctIndex": 1,
        "explanation": "CSS (Cascading Style Sheets) controls layout, colors and typography of HTML documents.",
    },
    {
        "question": "What does the DOM represent in a browser?",
        "options": [
            "A database of stored cookies",
            "The network requests made by a page",
            "A tree of objects representing the page's document",
            "The compiled JavaScript bytecode",
        ],
        "correctIndex": 2,
        "explanation": "The Document Object Model is a tree of nodes that scripts can read and modify to change the page.",
    },
    {
        "question": "Which HTML element is used to link an external stylesheet?",
        "options": ["<style>", "<script>", "<css>", "<link>"],
        "correctIndex": 3,
        "explanation": "A <link rel=\"stylesheet\" href=\"...\"> element in the head loads an external CSS file.",
    },
    {
        "question": "Which CSS property makes an element a flex container?",
        "options": ["display: flex", "position: flex", "float: flex", "flex: container"],
        "correctIndex": 0,
        "explanation": "Setting display: flex on an element turns its direct children into flex items.",
    },
    {
        "question": "What is the purpose of the alt attribute on an <img> element?",
        "options": [
            "It sets the image's alternate size",
            "It provides a text description for accessibility and failed loads",
            "It chooses an alternate image format",
            "It delays loading the image",
        ],
        "correctIndex": 1,
        "explanation": "Screen readers announce the alt text, and browsers show it when the image cannot be loaded.",
    },
    {
        "question": "Which JavaScript keyword declares a block-scoped variable that cannot be reassigned?",
        "options": ["var", "let", "const", "static"],
        "correctIndex": 2,
        "explanation": "const declares a block-scoped binding that cannot be reassigned after initialization.",
    },
    {
        "question": "What does a CSS media query allow you to do?",
        "options": [
            "Embed audio and video",
            "Query a database from the stylesheet",
            "Import fonts from a CDN",
            "Apply styles based on device characteristics such as width",
        ],
        "correctIndex": 3,
        "explanation": "Media queries apply rules conditionally, for example only when the viewport is narrower than 600px.",
    },
    {
        "question": "Which method adds an event handler to a DOM element?",
        "options": ["addEventListener", "attachHandler", "onEvent", "listenTo"],
        "correctIndex": 0,
        "explanation": "element.addEventListener(type, handler) registers a handler for events such as click or input.",
    },
    {
        "question": "What does 'responsive design' mean?",
        "options": [
            "Pages that respond quickly to server requests",
            "Layouts that adapt to different screen sizes",
            "Forms that validate input instantly",
            "Sites that reply to user messages",
        ],
        "correctIndex": 1,
        "explanation": "Responsive design uses fluid layouts and media queries so one page works on phones, tablets and desktops.",
    },
    {
        "question": "Which HTTP method is typically used to submit a form that creates data?",
        "options": ["GET", "HEAD", "POST", "OPTIONS"],
        "correctIndex": 2,
        "explanation": "POST sends the form body to the server and is the conventional method for creating resources.",
    },
    {
        "question": "In the CSS box model, which area lies between the border and the content?",
        "options": ["Margin", "Outline", "Gutter", "Padding"],
        "correctIndex": 3,
        "explanation": "From inside out the box model is content, padding, border and margin.",
    },
]

PYTHON_BANK = [
    {
        "question": "Which keyword defines a function in Python?",
        "options": ["def", "func", "function", "lambda"],
        "correctIndex": 0,
        "explanation": "Named functions are declared with def; lambda only creates small anonymous expressions.",
    },
    {
        "question": "Which built-in type is immutable?",
        "options": ["list", "tuple", "dict", "set"],
        "correctIndex": 1,
        "explanation": "Tuples cannot be changed after creation, while lists, dicts and sets can.",
    },
    {
        "question": "What does len([1, 2, 3]) return?",
        "options": ["2", "6", "3", "An error"],
        "correctIndex": 2,
        "explanation": "len returns the number of items in a container, and the list has three elements.",
    },
    {
        "question": "How do you start a single-line comment in Python?",
        "options": ["//", "/*", "--", "#"],
        "correctIndex": 3,
        "explanation": "Everything after a # on a line is ignored by the interpreter.",
    },
    {
        "question": "What is the result of 7 // 2 in Python 3?",
        "options": ["3", "3.5", "4", "1"],
        "correctIndex": 0,
        "explanation": "// is floor division, so 7 // 2 discards the fractional part and yields 3.",
    },
    {
        "question": "Which statement handles exceptions raised inside a block?",
        "options": ["catch ... finally", "try ... except", "guard ... else", "on error ... resume"],
        "correctIndex": 1,
        "explanation": "Code that may fail goes in try, and matching except clauses handle the raised exceptions.",
    },
    {
        "question": "What does a list comprehension like [x * 2 for x in items] produce?",
        "options": [
            "A generator object",
            "A dictionary keyed by x",
            "A new list with each item doubled",
            "The original list modified in place",
        ],
        "correctIndex": 2,
        "explanation": "A list comprehension builds a new list by evaluating the expression for every item.",
    },
    {
        "question": "Which tool installs third-party packages from PyPI?",
        "options": ["npm", "cargo", "gem", "pip"],
        "correctIndex": 3,
        "explanation": "pip downloads and installs packages from the Python Package Index.",
    },
    {
        "question": "What is the value of bool('') in Python?",
        "options": ["False", "True", "None", "It raises TypeError"],
        "correctIndex": 0,
        "explanation": "Empty strings, like other empty containers, are falsy.",
    },
    {
        "question": "Which statement is used to bring a module into the current namespace?",
        "options": ["include", "import", "require", "using"],
        "correctIndex": 1,
        "explanation": "import loads a module and binds it to a name in the current namespace.",
    },
    {
        "question": "What does the with statement guarantee when used with an open file?",
        "options": [
            "The file is read in binary mode",
            "The file is locked against other processes",
            "The file is closed when the block exits",
            "The file is created if missing",
        ],
        "correctIndex": 2,
        "explanation": "The file object is a context manager, so it is closed on exit even if an exception occurs.",
    },
    {
        "question": "Which method adds a single element to the end of a list?",
        "options": ["add", "push", "insert_end", "append"],
        "correctIndex": 3,
        "explanation": "list.append(x) adds x as one new element at the end of the list.",
    },
]

GIT_BANK = [
    {
        "question": "Which command creates a new, empty Git repository?",
        "options": ["git init", "git new", "git start", "git create"],
        "correctIndex": 0,
        "explanation": "git init creates the .git directory that turns a folder into a repository.",
    },
    {
        "question": "What does git clone do?",
        "options": [
            "Duplicates a branch inside the same repository",
            "Copies an existing repository, including its history",
            "Creates a backup of uncommitted changes",
            "Merges two remote repositories",
        ],
        "correctIndex": 1,
        "explanation": "git clone downloads a repository with its full history and sets up the origin remote.",
    },
    {
        "question": "Which command stages changes for the next commit?",
        "options": ["git commit", "git push", "git add", "git stage-all"],
        "correctIndex": 2,
        "explanation": "git add records changes in the index (staging area); git commit then saves them.",
    },
    {
        "question": "What does git status show?",
        "options": [
            "The list of remote servers",
            "The commit history graph",
            "The configured user name",
            "The state of the working tree and staging area",
        ],
        "correctIndex": 3,
        "explanation": "git status lists staged, unstaged and untracked files relative to the current branch.",
    },
    {
        "question": "Which command uploads local commits to a remote repository?",
        "options": ["git push", "git fetch", "git upload", "git sync"],
        "correctIndex": 0,
        "explanation": "git push sends commits from a local branch to the matching branch on a remote.",
    },
    {
        "question": "What is a branch in Git?",
        "options": [
            "A full copy of the repository on disk",
            "A movable pointer to a commit",
            "A list of ignored files",
            "A remote server address",
        ],
        "correctIndex": 1,
        "explanation": "A branch is a lightweight reference that advances as new commits are made on it.",
    },
    {
        "question": "How does git fetch differ from git pull?",
        "options": [
            "fetch also pushes local commits",
            "fetch deletes stale branches automatically",
            "fetch downloads remote changes without merging them",
            "There is no difference",
        ],
        "correctIndex": 2,
        "explanation": "git pull is a fetch followed by a merge or rebase; fetch alone only updates remote-tracking refs.",
    },
    {
        "question": "Which file lists paths that Git should not track?",
        "options": [".gitconfig", ".gitkeep", ".gitattributes", ".gitignore"],
        "correctIndex": 3,
        "explanation": "Patterns in .gitignore tell Git which untracked files to leave out of status and add.",
    },
    {
        "question": "What happens during a merge conflict?",
        "options": [
            "Git stops and asks you to resolve overlapping changes",
            "Git keeps the newest change automatically",
            "Git deletes both versions of the file",
            "Git creates a new branch for each version",
        ],
        "correctIndex": 0,
        "explanation": "When both sides changed the same lines, Git marks the conflict and waits for a manual resolution.",
    },
    {
        "question": "Which command shows the commit history?",
        "options": ["git history", "git log", "git show-all", "git timeline"],
        "correctIndex": 1,
        "explanation": "git log lists commits with their hashes, authors, dates and messages.",
    },
    {
        "question": "What does git stash do?",
        "options": [
            "Deletes untracked files",
            "Publishes a draft commit",
            "Temporarily shelves uncommitted changes",
            "Compresses the repository",
        ],
        "correctIndex": 2,
        "explanation": "git stash saves working changes on a stack so you can switch context and reapply them later.",
    },
    {
        "question": "Which command switches to another existing branch?",
        "options": ["git move", "git branch -d", "git jump", "git switch"],
        "correctIndex": 3,
        "explanation": "git switch <branch> (or the older git checkout <branch>) moves HEAD to that branch.",
    },
]

CURATED_BANKS = {
    "frontend": FRONTEND_BANK,
    "python": PYTHON_BANK,
    "git": GIT_BANK,
}

TOPIC_ALIASES = {
    "front-end": "frontend",
    "front end": "frontend",
    "frontend development": "frontend",
    "web frontend": "frontend",
    "python 3": "python",
    "python3": "python",
    "git basics": "git",
    "version control": "git",
}
