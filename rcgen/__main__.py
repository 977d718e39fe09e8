from rcgen.pipeline import main

main()
