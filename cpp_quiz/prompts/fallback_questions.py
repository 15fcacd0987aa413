"""Fallback Questions - Banco estatico usado quando o modelo falha."""

# =============================================================================
# BASIC
# =============================================================================

BASIC_QUESTIONS: list[dict] = [
    {
        "question": "What is the correct way to declare an integer variable in C++?",
        "options": ["int x;", "integer x;", "var x;", "x = int;"],
        "correct_index": 0,
        "explanation": "In C++, you declare an integer variable using 'int' followed by the variable name.",
    },
    {
        "question": "Which operator is used for assignment in C++?",
        "options": ["==", "=", "!=", ">="],
        "correct_index": 1,
        "explanation": "The single equals sign (=) is used for assignment, while == is used for comparison.",
    },
    {
        "question": "Which header must be included to use std::cout?",
        "options": ["<stdio.h>", "<string>", "<iostream>", "<output>"],
        "correct_index": 2,
        "explanation": "std::cout is declared in the <iostream> header.",
    },
    {
        "question": "What is the value of 7 / 2 when both operands are int?",
        "options": ["3.5", "4", "3", "2"],
        "correct_index": 2,
        "explanation": "Integer division truncates toward zero, so 7 / 2 evaluates to 3.",
    },
    {
        "question": "Which loop always executes its body at least once?",
        "options": ["for", "while", "range-based for", "do-while"],
        "correct_index": 3,
        "explanation": "A do-while loop checks its condition after the body, so the body runs at least once.",
    },
    {
        "question": "Which type is best suited to store a single character?",
        "options": ["char", "string", "bool", "short"],
        "correct_index": 0,
        "explanation": "The char type holds a single character.",
    },
    {
        "question": "What does the % operator compute for integers?",
        "options": ["Percentage", "Remainder of division", "Exponent", "Bitwise AND"],
        "correct_index": 1,
        "explanation": "The modulo operator % yields the remainder of integer division.",
    },
    {
        "question": "Which statement reads a value from standard input into x?",
        "options": ["std::cout << x;", "std::cin >> x;", "std::cin << x;", "read(x);"],
        "correct_index": 1,
        "explanation": "std::cin with the extraction operator >> reads input into a variable.",
    },
    {
        "question": "What is the result of the expression true && false?",
        "options": ["true", "1", "false", "undefined"],
        "correct_index": 2,
        "explanation": "Logical AND is true only when both operands are true.",
    },
    {
        "question": "How do you write a single-line comment in C++?",
        "options": ["# comment", "<!-- comment -->", "-- comment", "// comment"],
        "correct_index": 3,
        "explanation": "Two forward slashes start a comment that runs to the end of the line.",
    },
    {
        "question": "What is the index of the first element of an array in C++?",
        "options": ["0", "1", "-1", "Depends on the compiler"],
        "correct_index": 0,
        "explanation": "C++ arrays are zero-indexed.",
    },
    {
        "question": "Which keyword declares a variable whose value cannot change after initialization?",
        "options": ["static", "const", "final", "fixed"],
        "correct_index": 1,
        "explanation": "A const variable must be initialized and cannot be modified afterwards.",
    },
]

# =============================================================================
# MODERATE
# =============================================================================

MODERATE_QUESTIONS: list[dict] = [
    {
        "question": "What is a pointer in C++?",
        "options": ["A variable that stores a memory address", "A function", "A data type", "A loop"],
        "correct_index": 0,
        "explanation": "A pointer is a variable that stores the memory address of another variable.",
    },
    {
        "question": "Which keyword is used to create a class?",
        "options": ["struct", "object", "class", "instance"],
        "correct_index": 2,
        "explanation": "The 'class' keyword is used to define a class in C++.",
    },
    {
        "question": "What is the default member access for a class declared with 'class'?",
        "options": ["public", "protected", "private", "internal"],
        "correct_index": 2,
        "explanation": "Members of a class are private unless specified otherwise; struct members default to public.",
    },
    {
        "question": "Which operator releases memory allocated with new[]?",
        "options": ["delete", "delete[]", "free", "release"],
        "correct_index": 1,
        "explanation": "Arrays allocated with new[] must be released with delete[].",
    },
    {
        "question": "What makes a member function eligible for runtime polymorphism?",
        "options": ["Declaring it static", "Declaring it inline", "Declaring it const", "Declaring it virtual"],
        "correct_index": 3,
        "explanation": "Virtual functions are dispatched at runtime through the object's dynamic type.",
    },
    {
        "question": "Which STL container stores unique keys in sorted order?",
        "options": ["std::vector", "std::set", "std::unordered_map", "std::deque"],
        "correct_index": 1,
        "explanation": "std::set keeps unique elements ordered by the comparison function.",
    },
    {
        "question": "What does passing a parameter by reference (int& x) allow?",
        "options": [
            "The function can modify the caller's variable",
            "The argument is copied",
            "The argument must be a literal",
            "The parameter becomes read-only",
        ],
        "correct_index": 0,
        "explanation": "A reference parameter aliases the caller's object, so changes are visible to the caller.",
    },
    {
        "question": "When is a destructor called for an object with automatic storage?",
        "options": [
            "When the program starts",
            "When it is copied",
            "When it goes out of scope",
            "Only when delete is called",
        ],
        "correct_index": 2,
        "explanation": "Automatic objects are destroyed at the end of the enclosing scope.",
    },
    {
        "question": "Which syntax makes class Derived inherit publicly from Base?",
        "options": [
            "class Derived extends Base",
            "class Derived : public Base",
            "class Derived inherits Base",
            "class Derived(Base)",
        ],
        "correct_index": 1,
        "explanation": "C++ uses a colon followed by an access specifier and the base class name.",
    },
    {
        "question": "What does std::vector::push_back do?",
        "options": [
            "Removes the last element",
            "Inserts an element at the front",
            "Sorts the vector",
            "Appends an element at the end",
        ],
        "correct_index": 3,
        "explanation": "push_back adds a new element after the current last element.",
    },
    {
        "question": "What is function overloading?",
        "options": [
            "Several functions with the same name but different parameter lists",
            "A function that calls itself",
            "Redefining a virtual function in a derived class",
            "A function with too many parameters",
        ],
        "correct_index": 0,
        "explanation": "Overloads share a name and are selected by their parameter types.",
    },
    {
        "question": "What does the 'this' pointer refer to inside a member function?",
        "options": [
            "The base class",
            "The object the function was called on",
            "The first function argument",
            "The current stack frame",
        ],
        "correct_index": 1,
        "explanation": "'this' points to the object for which the member function was invoked.",
    },
]

# =============================================================================
# HARDER
# =============================================================================

HARDER_QUESTIONS: list[dict] = [
    {
        "question": "What is a template in C++?",
        "options": [
            "A data structure",
            "A blueprint for creating generic functions or classes",
            "A preprocessor macro",
            "A variable",
        ],
        "correct_index": 1,
        "explanation": "Templates are blueprints for generic functions and classes that work with different types.",
    },
    {
        "question": "What is a smart pointer?",
        "options": [
            "A fast pointer",
            "A large pointer",
            "A constant pointer",
            "A pointer that automatically manages memory",
        ],
        "correct_index": 3,
        "explanation": "Smart pointers release the owned object automatically, preventing memory leaks.",
    },
    {
        "question": "Which smart pointer expresses exclusive ownership and cannot be copied?",
        "options": ["std::shared_ptr", "std::weak_ptr", "std::unique_ptr", "std::auto_ptr"],
        "correct_index": 2,
        "explanation": "std::unique_ptr is move-only and owns its object exclusively.",
    },
    {
        "question": "What does std::move actually do?",
        "options": [
            "Casts its argument to an rvalue reference",
            "Copies the object to a new address",
            "Frees the object's memory",
            "Swaps two objects",
        ],
        "correct_index": 0,
        "explanation": "std::move is a cast to an rvalue reference; the move happens in the constructor or assignment it enables.",
    },
    {
        "question": "What does the capture [&] mean in a lambda expression?",
        "options": [
            "Capture nothing",
            "Capture all used variables by value",
            "Capture only this",
            "Capture all used variables by reference",
        ],
        "correct_index": 3,
        "explanation": "[&] captures every odr-used automatic variable by reference.",
    },
    {
        "question": "What problem does std::weak_ptr solve?",
        "options": [
            "Slow pointer dereferencing",
            "Reference cycles between shared_ptr owners",
            "Dangling raw pointers in arrays",
            "Thread synchronization",
        ],
        "correct_index": 1,
        "explanation": "weak_ptr observes a shared object without owning it, which breaks shared_ptr cycles.",
    },
    {
        "question": "What does SFINAE stand for?",
        "options": [
            "Static Function Inlining Always Enabled",
            "Substitution Failure Is Not An Error",
            "Safe Feature Initialization And Evaluation",
            "Single Function Instance Across Executables",
        ],
        "correct_index": 1,
        "explanation": "A failed template substitution removes the candidate from overload resolution instead of causing an error.",
    },
    {
        "question": "Which design pattern ensures a class has only one instance?",
        "options": ["Factory", "Observer", "Singleton", "Decorator"],
        "correct_index": 2,
        "explanation": "The Singleton pattern restricts instantiation to a single object.",
    },
    {
        "question": "What is the Rule of Five?",
        "options": [
            "A class should have at most five members",
            "Templates accept up to five parameters",
            "Inheritance chains should not exceed five levels",
            "If you define one special member function, consider defining destructor, copy and move operations",
        ],
        "correct_index": 3,
        "explanation": "Destructor, copy constructor, copy assignment, move constructor and move assignment usually go together.",
    },
    {
        "question": "What does the 'constexpr' specifier indicate?",
        "options": [
            "The value or function can be evaluated at compile time",
            "The variable is stored in read-only memory",
            "The function is always inlined",
            "The object cannot be moved",
        ],
        "correct_index": 0,
        "explanation": "constexpr allows evaluation in constant expressions at compile time.",
    },
    {
        "question": "What is CRTP?",
        "options": [
            "A runtime type identification mechanism",
            "A class deriving from a template instantiated with itself",
            "A memory allocation strategy",
            "A lambda capture rule",
        ],
        "correct_index": 1,
        "explanation": "In the Curiously Recurring Template Pattern, Derived inherits from Base<Derived> for static polymorphism.",
    },
    {
        "question": "What does 'noexcept' on a move constructor enable in std::vector?",
        "options": [
            "Faster element lookup",
            "Automatic sorting",
            "Moving instead of copying elements on reallocation",
            "Thread-safe push_back",
        ],
        "correct_index": 2,
        "explanation": "vector only moves elements during reallocation when the move constructor cannot throw.",
    },
]


FALLBACK_QUESTIONS: dict[str, list[dict]] = {
    "basic": BASIC_QUESTIONS,
    "moderate": MODERATE_QUESTIONS,
    "harder": HARDER_QUESTIONS,
}
